"""
Savings targets + affordability.

Monthly savings:
    base  = round(2000 × score/50)
    base  = round(base × 1.3) if age >45, round(base × 1.15) if age >35
    final = max(base, round(premium × 0.3))
Emergency fund:
    savings × months   (12 if score >70, 9 if >50, else 6)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.core.rounding import round_half_up
from app.schemas.financial import AffordabilityAssessment, FinancialStrain
from app.scoring.factors import first_above

BASE_MONTHLY_SAVINGS = 2_000
PREMIUM_SAVINGS_FLOOR_PCT = 0.30

SAVINGS_AGE_LADDER = [
    (45, 1.3),
    (35, 1.15),
]

EMERGENCY_MONTHS_LADDER = [
    (70, 12),
    (50, 9),
]
EMERGENCY_MONTHS_DEFAULT = 6


def monthly_savings(risk_score: int, premium: int, age: int) -> int:
    amount = round_half_up(BASE_MONTHLY_SAVINGS * (risk_score / 50))
    age_multiplier: Optional[float] = first_above(age, SAVINGS_AGE_LADDER, None)
    if age_multiplier is not None:
        amount = round_half_up(amount * age_multiplier)

    floor = round_half_up(premium * PREMIUM_SAVINGS_FLOOR_PCT)
    return max(amount, floor)


def emergency_fund_months(risk_score: int) -> int:
    return first_above(risk_score, EMERGENCY_MONTHS_LADDER, EMERGENCY_MONTHS_DEFAULT)


def emergency_fund(savings: int, risk_score: int) -> int:
    return savings * emergency_fund_months(risk_score)


# ═══════════════════════════════════════════════════════════════
# Affordability — share of monthly income going to premium + savings
#   upper bound inclusive, evaluated low-to-high
# ═══════════════════════════════════════════════════════════════
@dataclass(frozen=True)
class AffordabilityBand:
    max_pct: float
    score: int
    strain: FinancialStrain
    is_affordable: bool
    recommendation: str


AFFORDABILITY_BANDS = [
    AffordabilityBand(
        10, 100, "low", True,
        "Excellent affordability. You can comfortably manage this plan with room for additional savings.",
    ),
    AffordabilityBand(
        15, 85, "low", True,
        "Good affordability. This plan fits well within your budget with minimal financial strain.",
    ),
    AffordabilityBand(
        20, 70, "moderate", True,
        "Moderate affordability. This plan is manageable but will require careful budgeting.",
    ),
    AffordabilityBand(
        25, 50, "moderate", True,
        "Stretching your budget. Consider a lower-tier plan or reduce savings amount temporarily.",
    ),
    AffordabilityBand(
        30, 30, "high", False,
        "High financial strain. Strongly recommend considering a more affordable plan option.",
    ),
]
UNAFFORDABLE_BAND = AffordabilityBand(
    float("inf"), 10, "critical", False,
    "Not affordable. This plan exceeds recommended spending limits. Please choose a lower-tier plan.",
)


def assess_affordability(monthly_income: float, premium: int, savings: int) -> AffordabilityAssessment:
    if monthly_income <= 0:
        raise ValueError("monthly_income must be positive")

    income_pct = (premium + savings) / monthly_income * 100
    band = next((b for b in AFFORDABILITY_BANDS if income_pct <= b.max_pct), UNAFFORDABLE_BAND)

    return AffordabilityAssessment(
        is_affordable=band.is_affordable,
        affordability_score=band.score,
        income_percentage=round_half_up(income_pct * 10) / 10,
        financial_strain=band.strain,
        recommendation=band.recommendation,
    )
