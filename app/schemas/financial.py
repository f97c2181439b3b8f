"""
Financial-Planning stage payloads.
"""
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.profile import EnvironmentalReading, UserProfile
from app.schemas.risk import Priority, RiskAnalysisResponse

FinancialStrain = Literal["low", "moderate", "high", "critical"]

AUTO_PAY_MESSAGE = (
    "Auto-pay feature coming soon! You'll be able to set up automatic deductions "
    "from your bank account for insurance premiums and savings."
)


class InsuranceSelection(BaseModel):
    """A tier priced for one person. coverage/premium in INR, premium monthly."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    coverage: int
    premium: int
    features: list[str]
    advantages: list[str] = []
    disadvantages: list[str] = []
    recommended: bool


class FinancialRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    suggestion: str
    amount: Optional[int] = None
    priority: Priority


class AffordabilityAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_affordable: bool
    affordability_score: int = Field(ge=0, le=100)
    income_percentage: float
    financial_strain: FinancialStrain
    recommendation: str


class FinancialResult(BaseModel):
    """Deterministic planning output. Immutable once produced."""
    model_config = ConfigDict(frozen=True)

    insurance_plan: InsuranceSelection
    alternative_plans: list[InsuranceSelection]
    monthly_savings: int
    emergency_fund: int
    yearly_health_budget: int
    recommendations: list[FinancialRecommendation]
    narrative: str = ""


class AutoPaySetup(BaseModel):
    available: bool = False
    message: str = AUTO_PAY_MESSAGE


class FinancialPlanRequest(BaseModel):
    """
    POST /v1/assessment/financial

    risk_result is the RiskAnalysisResponse returned by the risk stage.
    """
    risk_result: RiskAnalysisResponse
    profile: UserProfile
    monthly_income: Optional[float] = Field(None, gt=0, description="Enables the affordability check")


class FinancialPlanResponse(BaseModel):
    insurance_plan: InsuranceSelection
    alternative_plans: list[InsuranceSelection]
    monthly_savings: int
    emergency_fund: int
    yearly_health_budget: int
    recommendations: list[FinancialRecommendation]
    affordability: Optional[AffordabilityAssessment] = None
    narrative: str
    narrative_is_fallback: bool = True
    auto_pay_setup: AutoPaySetup = AutoPaySetup()
    timestamp: datetime


class FullAssessmentRequest(BaseModel):
    """POST /v1/assessment/full — both stages in one call."""
    profile: UserProfile
    environmental: Optional[EnvironmentalReading] = None
    monthly_income: Optional[float] = Field(None, gt=0)


class FullAssessmentResponse(BaseModel):
    risk: RiskAnalysisResponse
    financial: FinancialPlanResponse
