"""
Assessment Orchestrator

Risk stage:       snapshot → reference lookups → score → enrich (narrative ∥ prevention steps)
Financial stage:  recommend → enrich (narrative) → affordability → persist (best-effort)

Enrichment never fails a stage (it always resolves to text or a fallback).
Persistence failures are logged and swallowed; the computed result is still returned.
Scoring/planning exceptions propagate to the API layer.
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Optional

import structlog

from app.data.reference import (
    lookup_city_stats,
    lookup_insurance_tiers,
    lookup_occupation_hazard,
    lookup_statistical_data,
)
from app.planning import engine as planning_engine
from app.planning.savings import assess_affordability
from app.schemas.financial import (
    FinancialPlanRequest,
    FinancialPlanResponse,
    FullAssessmentRequest,
    FullAssessmentResponse,
)
from app.schemas.profile import UserProfile
from app.schemas.risk import RiskAnalysisRequest, RiskAnalysisResponse
from app.scoring import engine as scoring_engine
from app.services import prompts
from app.services.assessment_store import AssessmentStore
from app.services.environment import EnvironmentService
from app.services.narrative import (
    FINANCIAL_NARRATIVE_FALLBACK,
    PREVENTION_STEPS_FALLBACK,
    RISK_NARRATIVE_FALLBACK,
    NarrativeEnricher,
    to_prevention_steps,
)

logger = structlog.get_logger()


class AssessmentOrchestrator:

    def __init__(
        self,
        enricher: NarrativeEnricher,
        environment: EnvironmentService,
        store: Optional[AssessmentStore] = None,
    ):
        self.enricher = enricher
        self.environment = environment
        self.store = store

    async def analyze_risk(self, request: RiskAnalysisRequest) -> RiskAnalysisResponse:
        profile = request.profile
        environmental = request.environmental or await self.environment.lookup(profile.city)

        hazard = lookup_occupation_hazard(profile.occupation)
        city = lookup_city_stats(profile.city)
        statistical = request.statistical or lookup_statistical_data(profile.city, profile.occupation)

        result = scoring_engine.score(scoring_engine.RiskInputs(
            profile=profile,
            environmental=environmental,
            occupation_hazard=hazard,
            city_stats=city,
            statistical=statistical,
        ))

        level_label, _ = scoring_engine.RISK_LEVEL_INFO[result.level]
        narrative, steps = await asyncio.gather(
            self.enricher.enrich(
                prompts.health_risk_prompt(
                    profile, environmental, hazard, city, statistical, result.score, level_label,
                ),
                RISK_NARRATIVE_FALLBACK,
                kind="risk_analysis",
            ),
            self.enricher.enrich_list(
                prompts.prevention_steps_prompt(result.factors, profile, hazard),
                PREVENTION_STEPS_FALLBACK,
                kind="prevention_steps",
            ),
        )
        result = result.model_copy(update={"narrative": narrative.value})

        logger.info(
            "risk_analysis_complete",
            city=profile.city,
            occupation=profile.occupation,
            score=result.score,
            level=result.level.value,
            narrative_fallback=narrative.is_fallback,
            steps_fallback=steps.is_fallback,
        )

        return RiskAnalysisResponse(
            risk_score=result.score,
            risk_level=result.level,
            risk_factors=result.factors,
            environmental_data=environmental,
            statistical_data=statistical,
            prevention_steps=to_prevention_steps(steps.value),
            narrative=result.narrative,
            narrative_is_fallback=narrative.is_fallback,
            timestamp=datetime.now(timezone.utc),
        )

    async def plan_finances(
        self,
        request: FinancialPlanRequest,
        user_id: Optional[str] = None,
    ) -> FinancialPlanResponse:
        risk = request.risk_result
        profile = request.profile

        result = planning_engine.recommend(risk.risk_score, profile.age, lookup_insurance_tiers())

        narrative = await self.enricher.enrich(
            prompts.financial_plan_prompt(
                profile, risk.risk_score, risk.risk_level, risk.risk_factors, result.insurance_plan,
            ),
            FINANCIAL_NARRATIVE_FALLBACK,
            kind="financial_plan",
        )
        result = result.model_copy(update={"narrative": narrative.value})

        affordability = None
        if request.monthly_income is not None:
            affordability = assess_affordability(
                request.monthly_income, result.insurance_plan.premium, result.monthly_savings,
            )

        response = FinancialPlanResponse(
            insurance_plan=result.insurance_plan,
            alternative_plans=result.alternative_plans,
            monthly_savings=result.monthly_savings,
            emergency_fund=result.emergency_fund,
            yearly_health_budget=result.yearly_health_budget,
            recommendations=result.recommendations,
            affordability=affordability,
            narrative=result.narrative,
            narrative_is_fallback=narrative.is_fallback,
            timestamp=datetime.now(timezone.utc),
        )

        if user_id is not None:
            await self.persist(user_id, profile, risk, response)
        return response

    async def run_full(self, request: FullAssessmentRequest, user_id: Optional[str] = None) -> FullAssessmentResponse:
        risk = await self.analyze_risk(RiskAnalysisRequest(
            profile=request.profile,
            environmental=request.environmental,
        ))
        financial = await self.plan_finances(
            FinancialPlanRequest(
                risk_result=risk,
                profile=request.profile,
                monthly_income=request.monthly_income,
            ),
            user_id=user_id,
        )
        return FullAssessmentResponse(risk=risk, financial=financial)

    async def persist(
        self,
        user_id: str,
        profile: UserProfile,
        risk: RiskAnalysisResponse,
        financial: FinancialPlanResponse,
    ) -> Optional[str]:
        if self.store is None:
            return None
        try:
            return await self.store.save(user_id, profile, risk, financial)
        except Exception as e:
            # Best-effort: the caller still gets the computed plan
            logger.warning("assessment_persist_failed", user_id=user_id, error=str(e))
            return None
