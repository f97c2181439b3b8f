"""
Builders for scoring inputs: a baseline low-risk profile plus overrides.
"""
from app.data.crime_statistics import CityStats
from app.schemas.profile import EnvironmentalReading, UserProfile, WorkShift


def make_profile(**overrides) -> UserProfile:
    kwargs = {
        "age": 28,
        "occupation": "IT Professional",
        "city": "Pune",
        "area": "Kothrud",
        "work_shift": WorkShift.DAY,
        "health_condition": "None",
        "addictions": "None",
        "past_surgery": "None",
    }
    kwargs.update(overrides)
    return UserProfile(**kwargs)


def make_environment(aqi: int = 40, **overrides) -> EnvironmentalReading:
    kwargs = {"aqi": aqi, "temperature": 27, "humidity": 60, "city": "Pune"}
    kwargs.update(overrides)
    return EnvironmentalReading(**kwargs)


def make_city(crime_rate: float = 200.0, city: str = "Testpur") -> CityStats:
    return CityStats(
        city=city,
        crime_rate=crime_rate,
        safety_index=70,
        common_crimes=("Theft",),
        health_risk_impact=20,
        stress_level="medium",
        recommendations=("Stay aware of surroundings",),
    )
