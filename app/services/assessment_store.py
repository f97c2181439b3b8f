"""
Assessment store — one append-only row per completed assessment,
keyed by requester identity.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.analysis_result import AnalysisResult
from app.schemas.financial import FinancialPlanResponse
from app.schemas.profile import UserProfile
from app.schemas.risk import RiskAnalysisResponse

logger = structlog.get_logger()


class AssessmentStore:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(
        self,
        user_id: str,
        profile: UserProfile,
        risk: RiskAnalysisResponse,
        financial: FinancialPlanResponse,
    ) -> str:
        now = datetime.now(timezone.utc)
        record = AnalysisResult(
            id=str(uuid.uuid4()),
            user_id=user_id,
            profile_data=profile.model_dump(mode="json"),
            risk_result=risk.model_dump(mode="json"),
            financial_result=financial.model_dump(mode="json"),
            created_at=now,
            updated_at=now,
        )
        self.session.add(record)
        await self.session.commit()
        logger.info("assessment_persisted", record_id=record.id, user_id=user_id)
        return record.id
