"""
Health risk scoring terms + risk-factor derivation.

Score terms (additive, each independently capped):
  Base 10 · Age 0-20 · AQI 5-25 · Occupation 0-20 · Condition 15 ·
  Addiction 10 · Surgery 5 · Work shift 0-5 · Crime stress 5-10

Risk factors are a separate, display-oriented derivation. Their thresholds
differ from the score bands on purpose; keep the two tables apart.

Convention: HIGHER score = HIGHER risk.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

from app.core.rounding import round_half_up
from app.data.crime_statistics import CityStats
from app.data.occupation_hazards import OccupationHazard
from app.schemas.profile import EnvironmentalReading, StatisticalData, UserProfile, WorkShift, is_present
from app.schemas.risk import RiskFactor, RiskLevel

T = TypeVar("T")


@dataclass(frozen=True)
class TermResult:
    term_name: str
    raw_value: str
    band_label: str
    points: int


def first_above(value: float, ladder: list[tuple[float, T]], default: T) -> T:
    """Walk a high-to-low (threshold, result) ladder; first strict `value > threshold` wins."""
    for threshold, result in ladder:
        if value > threshold:
            return result
    return default


# ═══════════════════════════════════════════════════════════════
# Ladders — (exclusive lower bound, (band label, points))
# ═══════════════════════════════════════════════════════════════
AGE_LADDER = [
    (60, (">60", 20)),
    (50, ("51-60", 15)),
    (40, ("41-50", 10)),
    (30, ("31-40", 5)),
]
AGE_DEFAULT = ("≤30", 0)

AQI_LADDER = [
    (200, (">200 (Hazardous)", 25)),
    (150, ("151-200 (Unhealthy)", 20)),
    (100, ("101-150 (Sensitive)", 15)),
    (50, ("51-100 (Moderate)", 10)),
]
AQI_DEFAULT = ("≤50 (Good)", 5)

CRIME_STRESS_LADDER = [
    (1000, 20),
    (500, 15),
    (300, 10),
]
CRIME_STRESS_DEFAULT = 5
CRIME_STRESS_SCORE_CAP = 10

BASE_POINTS = 10
OCCUPATION_WEIGHT = 0.2


def crime_stress_impact(crime_rate: float) -> int:
    """Stress tier for a crime rate per 100k. Uncapped; the score term caps it separately."""
    return first_above(crime_rate, CRIME_STRESS_LADDER, CRIME_STRESS_DEFAULT)


# ═══════════════════════════════════════════════════════════════
# Score terms
# ═══════════════════════════════════════════════════════════════
def score_base() -> TermResult:
    return TermResult("Base", "-", "Baseline", BASE_POINTS)


def score_age(age: int) -> TermResult:
    label, points = first_above(age, AGE_LADDER, AGE_DEFAULT)
    return TermResult("Age", str(age), label, points)


def score_aqi(aqi: int) -> TermResult:
    label, points = first_above(aqi, AQI_LADDER, AQI_DEFAULT)
    return TermResult("AirQuality", str(aqi), label, points)


def score_occupation(hazard: OccupationHazard) -> TermResult:
    points = round_half_up(hazard.risk_score * OCCUPATION_WEIGHT)
    return TermResult("Occupation", hazard.occupation, hazard.hazard_level.value, points)


def score_health_condition(condition: Optional[str]) -> TermResult:
    if is_present(condition):
        return TermResult("HealthCondition", condition, "Present", 15)
    return TermResult("HealthCondition", "None", "Absent", 0)


def score_addictions(addictions: Optional[str]) -> TermResult:
    if is_present(addictions):
        return TermResult("Addiction", addictions, "Present", 10)
    return TermResult("Addiction", "None", "Absent", 0)


def score_past_surgery(past_surgery: Optional[str]) -> TermResult:
    if is_present(past_surgery):
        return TermResult("PastSurgery", past_surgery, "Present", 5)
    return TermResult("PastSurgery", "None", "Absent", 0)


def score_work_shift(shift: Optional[WorkShift]) -> TermResult:
    if shift == WorkShift.NIGHT:
        return TermResult("WorkShift", shift.value, "Night", 5)
    elif shift == WorkShift.ROTATING:
        return TermResult("WorkShift", shift.value, "Rotating", 3)
    else:
        return TermResult("WorkShift", shift.value if shift else "Unknown", "Day/Other", 0)


def score_crime_stress(crime_rate: float) -> TermResult:
    tier = crime_stress_impact(crime_rate)
    return TermResult(
        "CrimeStress",
        f"{crime_rate:.1f}/100k",
        f"tier {tier} (cap {CRIME_STRESS_SCORE_CAP})",
        min(tier, CRIME_STRESS_SCORE_CAP),
    )


# ═══════════════════════════════════════════════════════════════
# Risk factors — emitted in a fixed order, then stable-sorted by impact
# ═══════════════════════════════════════════════════════════════
def derive_risk_factors(
    profile: UserProfile,
    environmental: EnvironmentalReading,
    hazard: OccupationHazard,
    city: CityStats,
    statistical: StatisticalData,
) -> list[RiskFactor]:
    factors: list[RiskFactor] = []

    # Air quality
    aqi = environmental.aqi
    if aqi > 150:
        factors.append(RiskFactor(
            category="Air Quality",
            level=RiskLevel.CRITICAL if aqi > 200 else RiskLevel.HIGH,
            description=f"AQI of {aqi} poses significant respiratory health risks",
            impact=25 if aqi > 200 else 20,
        ))
    elif aqi > 100:
        factors.append(RiskFactor(
            category="Air Quality",
            level=RiskLevel.MEDIUM,
            description=f"AQI of {aqi} may affect sensitive individuals",
            impact=15,
        ))

    # Occupation
    if hazard.hazard_level in (RiskLevel.HIGH, RiskLevel.CRITICAL):
        factors.append(RiskFactor(
            category="Occupational Hazard",
            level=hazard.hazard_level,
            description=(
                f"{profile.occupation} has {hazard.hazard_level.value} risk level with death rate "
                f"of {hazard.death_rate} per 100,000 workers"
            ),
            impact=hazard.risk_score * OCCUPATION_WEIGHT,
        ))

    # Age
    if profile.age > 50:
        factors.append(RiskFactor(
            category="Age Factor",
            level=RiskLevel.HIGH if profile.age > 60 else RiskLevel.MEDIUM,
            description=f"Age {profile.age} increases susceptibility to health conditions",
            impact=20 if profile.age > 60 else 15,
        ))

    if is_present(profile.health_condition):
        factors.append(RiskFactor(
            category="Pre-existing Condition",
            level=RiskLevel.HIGH,
            description=f"Existing health condition: {profile.health_condition}",
            impact=15,
        ))

    if is_present(profile.addictions):
        factors.append(RiskFactor(
            category="Lifestyle Risk",
            level=RiskLevel.MEDIUM,
            description=f"Addiction to {profile.addictions} increases health risks",
            impact=10,
        ))

    # Rotating shifts score points but are not surfaced as a factor
    if profile.work_shift == WorkShift.NIGHT:
        factors.append(RiskFactor(
            category="Work Schedule",
            level=RiskLevel.MEDIUM,
            description="Night shift work disrupts circadian rhythm and increases health risks",
            impact=5,
        ))

    if city.crime_rate > 500:
        factors.append(RiskFactor(
            category="Environmental Stress",
            level=RiskLevel.HIGH if city.crime_rate > 1000 else RiskLevel.MEDIUM,
            description=f"High crime rate ({city.crime_rate} per 100k) contributes to chronic stress",
            impact=crime_stress_impact(city.crime_rate),
        ))

    if statistical.city_health_index < 60:
        factors.append(RiskFactor(
            category="City Health Infrastructure",
            level=RiskLevel.HIGH if statistical.city_health_index < 40 else RiskLevel.MEDIUM,
            description=(
                f"City health index of {statistical.city_health_index}/100 "
                "indicates limited healthcare access"
            ),
            impact=10,
        ))

    # sorted() is stable with reverse=True: equal impacts keep emission order
    return sorted(factors, key=lambda f: f.impact, reverse=True)
