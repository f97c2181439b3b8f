"""
Reference Data Provider

Read-only lookups over the static tables. Every lookup is total:
an unknown key resolves to a documented default entry instead of raising.
"""
from __future__ import annotations

from app.data.crime_statistics import CITY_STATISTICS, CityStats, default_city_stats
from app.data.insurance_plans import INSURANCE_TIERS, InsuranceTier
from app.data.occupation_hazards import DEFAULT_OCCUPATION, OCCUPATION_HAZARDS, OccupationHazard
from app.schemas.profile import StatisticalData


def lookup_city_stats(city: str) -> CityStats:
    return CITY_STATISTICS.get(city) or default_city_stats(city)


def lookup_occupation_hazard(occupation: str) -> OccupationHazard:
    return OCCUPATION_HAZARDS.get(occupation) or OCCUPATION_HAZARDS[DEFAULT_OCCUPATION]


def lookup_insurance_tiers() -> tuple[InsuranceTier, ...]:
    return INSURANCE_TIERS


def lookup_statistical_data(city: str, occupation: str) -> StatisticalData:
    """
    City health index is the inverse of the city's health-risk impact;
    death rate is the occupational fatality rate per 100k workers.
    """
    stats = lookup_city_stats(city)
    hazard = lookup_occupation_hazard(occupation)
    return StatisticalData(
        city_health_index=100 - stats.health_risk_impact,
        death_rate=hazard.death_rate,
    )
