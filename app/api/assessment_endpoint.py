"""
POST /v1/assessment/risk       → Risk-Analysis stage
POST /v1/assessment/financial  → Financial-Planning stage (persists the assessment)
POST /v1/assessment/full       → both stages in one call

Auth is resolved before any computation. Narrative and persistence failures
never change the response; scoring/planning faults surface as 500.
"""
from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_orchestrator
from app.core.auth import current_user_id
from app.schemas.financial import (
    FinancialPlanRequest,
    FinancialPlanResponse,
    FullAssessmentRequest,
    FullAssessmentResponse,
)
from app.schemas.risk import RiskAnalysisRequest, RiskAnalysisResponse
from app.services.orchestrator import AssessmentOrchestrator

logger = structlog.get_logger()
router = APIRouter(prefix="/v1/assessment", tags=["assessment"])


@router.post(
    "/risk",
    response_model=RiskAnalysisResponse,
    summary="Score personal health risk",
    description="Fuses profile, environment, occupation and city signals into a 0-100 risk score.",
)
async def analyze_risk(
    request: RiskAnalysisRequest,
    user_id: str = Depends(current_user_id),
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> RiskAnalysisResponse:

    logger.info(
        "risk_analysis_started",
        user_id=user_id,
        city=request.profile.city,
        occupation=request.profile.occupation,
    )

    try:
        return await orchestrator.analyze_risk(request)
    except Exception as e:
        logger.error("risk_analysis_failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to complete risk analysis: {e}")


@router.post(
    "/financial",
    response_model=FinancialPlanResponse,
    summary="Recommend insurance and savings for a scored profile",
    description="Consumes the risk-stage result; stores the combined assessment best-effort.",
)
async def plan_finances(
    request: FinancialPlanRequest,
    user_id: str = Depends(current_user_id),
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> FinancialPlanResponse:

    logger.info(
        "financial_planning_started",
        user_id=user_id,
        risk_score=request.risk_result.risk_score,
    )

    try:
        return await orchestrator.plan_finances(request, user_id=user_id)
    except Exception as e:
        logger.error("financial_planning_failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to complete financial planning: {e}")


@router.post(
    "/full",
    response_model=FullAssessmentResponse,
    summary="Run risk analysis and financial planning end-to-end",
)
async def run_full_assessment(
    request: FullAssessmentRequest,
    user_id: str = Depends(current_user_id),
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> FullAssessmentResponse:
    try:
        return await orchestrator.run_full(request, user_id=user_id)
    except Exception as e:
        logger.error("full_assessment_failed", user_id=user_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to complete assessment: {e}")


@router.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "service": "carefund-risk-planner"}
