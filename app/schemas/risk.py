"""
Risk-Analysis stage payloads.

RiskResult is the pure engine output; RiskAnalysisResponse is what the
caller receives (engine output + echoes + narrative + prevention steps).
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.profile import EnvironmentalReading, StatisticalData, UserProfile


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


Priority = Literal["high", "medium", "low"]


class RiskFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    level: RiskLevel
    description: str
    impact: float


class RiskResult(BaseModel):
    """Deterministic scoring output. Immutable once produced."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: RiskLevel
    factors: list[RiskFactor]
    narrative: str = ""


class PreventionStep(BaseModel):
    priority: Priority
    action: str
    description: str
    frequency: str = "Daily"


class RiskAnalysisRequest(BaseModel):
    """
    POST /v1/assessment/risk

    environmental may be omitted; the service then fetches a snapshot
    (live or estimated) for profile.city.
    """
    profile: UserProfile
    environmental: Optional[EnvironmentalReading] = None
    statistical: Optional[StatisticalData] = Field(
        None, description="Override for the city/occupation statistical reference data",
    )


class RiskAnalysisResponse(BaseModel):
    risk_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    risk_factors: list[RiskFactor]
    environmental_data: EnvironmentalReading
    statistical_data: StatisticalData
    prevention_steps: list[PreventionStep]
    narrative: str
    narrative_is_fallback: bool = True
    timestamp: datetime
