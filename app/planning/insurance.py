"""
Insurance tier selection + pricing.

Selection: first tier (table order) whose risk range contains the score.
Coverage:  score >70 → max, >50 → midpoint, else → min.
Premium:   base × age multiplier (rounded) × (1 + score/100) (rounded again).
"""
from __future__ import annotations

from typing import Sequence

from app.core.rounding import round_half_up
from app.data.insurance_plans import InsuranceTier
from app.schemas.financial import InsuranceSelection
from app.scoring.factors import first_above

# Fallback when no range contains the score: second tier in table order
FALLBACK_TIER_INDEX = 1

AGE_PREMIUM_LADDER = [
    (50, 1.5),
    (35, 1.2),
]
AGE_PREMIUM_DEFAULT = 1.0


def select_tier(risk_score: int, tiers: Sequence[InsuranceTier]) -> InsuranceTier:
    for tier in tiers:
        if tier.risk_range.contains(risk_score):
            return tier
    return tiers[FALLBACK_TIER_INDEX]


def coverage_for(tier: InsuranceTier, risk_score: int) -> int:
    if risk_score > 70:
        return tier.max_coverage
    elif risk_score > 50:
        return round_half_up((tier.min_coverage + tier.max_coverage) / 2)
    else:
        return tier.min_coverage


def premium_for(tier: InsuranceTier, risk_score: int, age: int) -> int:
    # Two rounding points: after the age step and after the risk step
    age_multiplier = first_above(age, AGE_PREMIUM_LADDER, AGE_PREMIUM_DEFAULT)
    premium = round_half_up(tier.base_premium * age_multiplier)
    return round_half_up(premium * (1 + risk_score / 100))


def price_tier(
    tier: InsuranceTier,
    risk_score: int,
    age: int,
    coverage: int,
    recommended: bool,
) -> InsuranceSelection:
    return InsuranceSelection(
        name=tier.name,
        type=tier.type,
        coverage=coverage,
        premium=premium_for(tier, risk_score, age),
        features=list(tier.features),
        advantages=list(tier.advantages),
        disadvantages=list(tier.disadvantages),
        recommended=recommended,
    )


def select_plan(risk_score: int, age: int, tiers: Sequence[InsuranceTier]) -> InsuranceSelection:
    tier = select_tier(risk_score, tiers)
    return price_tier(tier, risk_score, age, coverage_for(tier, risk_score), recommended=True)


def alternative_plans(
    risk_score: int,
    age: int,
    tiers: Sequence[InsuranceTier],
) -> list[InsuranceSelection]:
    """Every non-selected tier, quoted at its minimum coverage."""
    selected = select_tier(risk_score, tiers)
    return [
        price_tier(tier, risk_score, age, tier.min_coverage, recommended=False)
        for tier in tiers
        if tier.name != selected.name
    ]
