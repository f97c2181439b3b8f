"""
Inbound profile + environment payloads.

The profile is supplied once per assessment and never mutated.
Environmental readings are fetched separately by the caller (GET /v1/environment)
and echoed back into the risk request.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NONE_SENTINEL = "None"


class WorkShift(str, Enum):
    DAY = "Day Shift"
    NIGHT = "Night Shift"
    ROTATING = "Rotating Shift"

    @classmethod
    def _missing_(cls, value):
        # Accept short forms ("Night", "rotating") from older clients
        if isinstance(value, str):
            key = value.strip().lower().removesuffix(" shift")
            for member in cls:
                if member.value.lower().removesuffix(" shift") == key:
                    return member
        return None


def is_present(value: Optional[str]) -> bool:
    """True when a free-text field carries something other than the "None" sentinel."""
    if value is None:
        return False
    text = value.strip()
    return bool(text) and text.lower() != NONE_SENTINEL.lower()


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int = Field(gt=0, le=120)
    occupation: str = Field(min_length=1)
    city: str = Field(min_length=1)
    area: str = ""
    work_shift: WorkShift = WorkShift.DAY
    health_condition: str = NONE_SENTINEL
    addictions: str = NONE_SENTINEL
    past_surgery: str = NONE_SENTINEL


class EnvironmentSource(BaseModel):
    weather: str
    aqi: str


class EnvironmentalReading(BaseModel):
    """Read-only snapshot valid for a single assessment."""
    model_config = ConfigDict(frozen=True)

    aqi: int = Field(ge=0)
    temperature: float
    humidity: float = Field(ge=0, le=100)
    city: Optional[str] = None
    source: Optional[EnvironmentSource] = None
    timestamp: Optional[datetime] = None


class StatisticalData(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_health_index: int = Field(ge=0, le=100)
    death_rate: float = Field(ge=0)
