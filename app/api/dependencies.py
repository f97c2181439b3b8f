"""
Service wiring for the routers.

Enricher + environment service are process-wide (built once from settings);
the store and orchestrator are per-request because they hold a DB session.
"""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.models.database import get_db
from app.services.assessment_store import AssessmentStore
from app.services.environment import EnvironmentService
from app.services.narrative import EnrichmentConfig, NarrativeEnricher
from app.services.orchestrator import AssessmentOrchestrator


@lru_cache
def get_enricher() -> NarrativeEnricher:
    return NarrativeEnricher(EnrichmentConfig.from_settings(get_settings()))


@lru_cache
def get_environment_service() -> EnvironmentService:
    return EnvironmentService(get_settings())


async def get_assessment_store(db: AsyncSession = Depends(get_db)) -> AssessmentStore:
    return AssessmentStore(db)


async def get_orchestrator(
    store: AssessmentStore = Depends(get_assessment_store),
) -> AssessmentOrchestrator:
    return AssessmentOrchestrator(get_enricher(), get_environment_service(), store)
