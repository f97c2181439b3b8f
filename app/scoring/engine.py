"""
Health Risk Scoring Engine

Orchestrates:
  1. All 9 score terms
  2. Additive total, rounded and clamped to 0-100
  3. Level assignment
  4. Risk-factor derivation (ranked by impact)

Pure and synchronous: no I/O, no failure path for sentinel/missing text fields.
"""
from __future__ import annotations

import time
from dataclasses import dataclass

import structlog

from app.core.rounding import round_half_up
from app.data.crime_statistics import CityStats
from app.data.occupation_hazards import OccupationHazard
from app.schemas.profile import EnvironmentalReading, StatisticalData, UserProfile
from app.schemas.risk import RiskLevel, RiskResult
from app.scoring import factors

logger = structlog.get_logger()

SCORE_MIN = 0
SCORE_MAX = 100


# ═══════════════════════════════════════════════════════════════
# Level thresholds — lower bound inclusive, evaluated high-to-low
#   score >= 80  → critical
#   score >= 60  → high
#   score >= 40  → medium
#   otherwise    → low
# ═══════════════════════════════════════════════════════════════
LEVEL_THRESHOLDS = [
    (80, RiskLevel.CRITICAL),
    (60, RiskLevel.HIGH),
    (40, RiskLevel.MEDIUM),
]

RISK_LEVEL_INFO: dict[RiskLevel, tuple[str, str]] = {
    RiskLevel.LOW: (
        "Low Risk",
        "Your health risk profile is favorable. Continue maintaining healthy habits.",
    ),
    RiskLevel.MEDIUM: (
        "Medium Risk",
        "Some risk factors identified. Follow prevention steps to reduce risks.",
    ),
    RiskLevel.HIGH: (
        "High Risk",
        "Multiple risk factors present. Immediate preventive action recommended.",
    ),
    RiskLevel.CRITICAL: (
        "Critical Risk",
        "Significant health risks identified. Urgent medical consultation advised.",
    ),
}


@dataclass(frozen=True)
class RiskInputs:
    profile: UserProfile
    environmental: EnvironmentalReading
    occupation_hazard: OccupationHazard
    city_stats: CityStats
    statistical: StatisticalData


def level_for(score: int) -> RiskLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return RiskLevel.LOW


def compute_terms(inputs: RiskInputs) -> list[factors.TermResult]:
    profile = inputs.profile
    return [
        factors.score_base(),
        factors.score_age(profile.age),
        factors.score_aqi(inputs.environmental.aqi),
        factors.score_occupation(inputs.occupation_hazard),
        factors.score_health_condition(profile.health_condition),
        factors.score_addictions(profile.addictions),
        factors.score_past_surgery(profile.past_surgery),
        factors.score_work_shift(profile.work_shift),
        factors.score_crime_stress(inputs.city_stats.crime_rate),
    ]


def score(inputs: RiskInputs) -> RiskResult:
    """
    Main scoring entry point.
    """
    t0 = time.perf_counter_ns()

    terms = compute_terms(inputs)
    total = round_half_up(sum(t.points for t in terms))
    total = max(SCORE_MIN, min(total, SCORE_MAX))

    level = level_for(total)
    risk_factors = factors.derive_risk_factors(
        inputs.profile,
        inputs.environmental,
        inputs.occupation_hazard,
        inputs.city_stats,
        inputs.statistical,
    )

    elapsed_ms = int((time.perf_counter_ns() - t0) / 1_000_000)
    logger.info(
        "risk_scoring_complete",
        score=total,
        level=level.value,
        factors_count=len(risk_factors),
        terms={t.term_name: t.points for t in terms},
        elapsed_ms=elapsed_ms,
    )

    return RiskResult(score=total, level=level, factors=risk_factors)
