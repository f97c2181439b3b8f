"""
Settings are pinned before any app module reads them so tests never reach
the real OIDC issuer, the Gemini API or the WAQI feed.
"""
import os

os.environ.setdefault("AUTH_ENABLED", "false")
os.environ.setdefault("GEMINI_API_KEY", "")
os.environ.setdefault("AQICN_API_KEY", "")

import pytest

from app.schemas.profile import StatisticalData


@pytest.fixture
def healthy_stats() -> StatisticalData:
    return StatisticalData(city_health_index=80, death_rate=2.0)
