"""
City coordinates and static environmental estimates.

Estimates are historical averages used whenever a live reading is unavailable.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class EnvironmentEstimate:
    aqi: int
    temperature: int
    humidity: int


CITY_COORDINATES: dict[str, Coordinates] = {
    "Mumbai": Coordinates(19.076, 72.8777),
    "Delhi": Coordinates(28.7041, 77.1025),
    "Bangalore": Coordinates(12.9716, 77.5946),
    "Hyderabad": Coordinates(17.385, 78.4867),
    "Chennai": Coordinates(13.0827, 80.2707),
    "Kolkata": Coordinates(22.5726, 88.3639),
    "Pune": Coordinates(18.5204, 73.8567),
    "Ahmedabad": Coordinates(23.0225, 72.5714),
    "Jaipur": Coordinates(26.9124, 75.7873),
    "Lucknow": Coordinates(26.8467, 80.9462),
}

ESTIMATED_ENVIRONMENT: dict[str, EnvironmentEstimate] = {
    "Mumbai": EnvironmentEstimate(aqi=165, temperature=29, humidity=75),
    "Delhi": EnvironmentEstimate(aqi=220, temperature=26, humidity=55),
    "Bangalore": EnvironmentEstimate(aqi=95, temperature=24, humidity=65),
    "Hyderabad": EnvironmentEstimate(aqi=130, temperature=28, humidity=55),
    "Chennai": EnvironmentEstimate(aqi=140, temperature=30, humidity=72),
    "Kolkata": EnvironmentEstimate(aqi=180, temperature=28, humidity=75),
    "Pune": EnvironmentEstimate(aqi=110, temperature=26, humidity=60),
    "Ahmedabad": EnvironmentEstimate(aqi=150, temperature=29, humidity=50),
    "Jaipur": EnvironmentEstimate(aqi=160, temperature=27, humidity=45),
    "Lucknow": EnvironmentEstimate(aqi=190, temperature=27, humidity=60),
}

DEFAULT_ESTIMATE = EnvironmentEstimate(aqi=150, temperature=28, humidity=60)


def estimate_for(city: str) -> EnvironmentEstimate:
    return ESTIMATED_ENVIRONMENT.get(city, DEFAULT_ESTIMATE)
