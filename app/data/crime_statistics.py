"""
City crime & safety statistics for major Indian cities.

Figures follow the National Crime Records Bureau (NCRB) city reports.
crime_rate is per 100,000 population; safety_index and health_risk_impact are 0-100.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

StressLevel = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class CityStats:
    city: str
    crime_rate: float
    safety_index: int
    common_crimes: tuple[str, ...]
    health_risk_impact: int
    stress_level: StressLevel
    recommendations: tuple[str, ...]


CITY_STATISTICS: dict[str, CityStats] = {
    "Mumbai": CityStats(
        city="Mumbai",
        crime_rate=182.5,
        safety_index=65,
        common_crimes=("Theft", "Burglary", "Assault", "Cyber Crime"),
        health_risk_impact=35,
        stress_level="high",
        recommendations=(
            "Be vigilant in crowded areas",
            "Avoid isolated areas at night",
            "Use secure transportation",
            "Keep emergency contacts handy",
            "Install home security systems",
        ),
    ),
    "Delhi": CityStats(
        city="Delhi",
        crime_rate=1586.1,
        safety_index=45,
        common_crimes=("Theft", "Assault", "Robbery", "Vehicle Theft", "Cyber Crime"),
        health_risk_impact=55,
        stress_level="high",
        recommendations=(
            "Avoid traveling alone at night",
            "Use trusted transportation services",
            "Be aware of surroundings",
            "Keep valuables secure",
            "Report suspicious activities",
        ),
    ),
    "Bangalore": CityStats(
        city="Bangalore",
        crime_rate=455.8,
        safety_index=70,
        common_crimes=("Cyber Crime", "Theft", "Burglary", "Traffic Violations"),
        health_risk_impact=30,
        stress_level="medium",
        recommendations=(
            "Be cautious with online transactions",
            "Secure personal information",
            "Follow traffic rules",
            "Use well-lit areas at night",
            "Install security cameras",
        ),
    ),
    "Hyderabad": CityStats(
        city="Hyderabad",
        crime_rate=398.2,
        safety_index=72,
        common_crimes=("Cyber Crime", "Theft", "Burglary", "Fraud"),
        health_risk_impact=28,
        stress_level="medium",
        recommendations=(
            "Protect digital identity",
            "Be cautious of fraud schemes",
            "Secure residential areas",
            "Use trusted services",
            "Stay informed about local safety",
        ),
    ),
    "Chennai": CityStats(
        city="Chennai",
        crime_rate=342.7,
        safety_index=75,
        common_crimes=("Theft", "Burglary", "Cyber Crime", "Traffic Violations"),
        health_risk_impact=25,
        stress_level="medium",
        recommendations=(
            "Secure homes and vehicles",
            "Be cautious online",
            "Follow road safety rules",
            "Use well-populated routes",
            "Keep emergency numbers accessible",
        ),
    ),
    "Kolkata": CityStats(
        city="Kolkata",
        crime_rate=156.8,
        safety_index=68,
        common_crimes=("Theft", "Burglary", "Assault", "Fraud"),
        health_risk_impact=32,
        stress_level="medium",
        recommendations=(
            "Be vigilant in crowded markets",
            "Secure personal belongings",
            "Avoid isolated areas",
            "Use trusted transportation",
            "Stay aware of surroundings",
        ),
    ),
    "Pune": CityStats(
        city="Pune",
        crime_rate=289.4,
        safety_index=76,
        common_crimes=("Cyber Crime", "Theft", "Burglary", "Traffic Violations"),
        health_risk_impact=24,
        stress_level="low",
        recommendations=(
            "Protect online accounts",
            "Secure residential areas",
            "Follow traffic safety",
            "Use well-lit areas at night",
            "Install home security",
        ),
    ),
    "Ahmedabad": CityStats(
        city="Ahmedabad",
        crime_rate=312.5,
        safety_index=74,
        common_crimes=("Theft", "Burglary", "Assault", "Cyber Crime"),
        health_risk_impact=26,
        stress_level="medium",
        recommendations=(
            "Be cautious in crowded areas",
            "Secure homes and vehicles",
            "Use trusted services",
            "Stay informed about local safety",
            "Keep emergency contacts ready",
        ),
    ),
    "Jaipur": CityStats(
        city="Jaipur",
        crime_rate=267.3,
        safety_index=77,
        common_crimes=("Theft", "Burglary", "Tourist-targeted crimes", "Cyber Crime"),
        health_risk_impact=23,
        stress_level="low",
        recommendations=(
            "Be cautious in tourist areas",
            "Secure valuables",
            "Use registered tour services",
            "Avoid isolated areas",
            "Keep copies of important documents",
        ),
    ),
    "Lucknow": CityStats(
        city="Lucknow",
        crime_rate=245.6,
        safety_index=78,
        common_crimes=("Theft", "Burglary", "Cyber Crime", "Fraud"),
        health_risk_impact=22,
        stress_level="low",
        recommendations=(
            "Secure personal belongings",
            "Be cautious online",
            "Use trusted transportation",
            "Stay in well-populated areas",
            "Report suspicious activities",
        ),
    ),
}


def default_city_stats(city: str) -> CityStats:
    """Generic urban profile for a city missing from the NCRB table."""
    return CityStats(
        city=city,
        crime_rate=300.0,
        safety_index=70,
        common_crimes=("General urban crimes",),
        health_risk_impact=30,
        stress_level="medium",
        recommendations=(
            "Follow general safety precautions",
            "Stay aware of surroundings",
            "Use trusted services",
            "Keep emergency contacts ready",
        ),
    )
