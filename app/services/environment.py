"""
Environmental snapshot lookup — never fails the caller.

Weather:  Open-Meteo current temperature + humidity (no key needed).
AQI:      WAQI city feed, then WAQI geo feed; only when AQICN_API_KEY is set.
Each field independently degrades to the static per-city estimate when the
live source is missing, slow, or returns garbage. One request per source,
no retries; the httpx timeout bounds every wait.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import httpx
import structlog

from app.core.config import Settings
from app.core.rounding import round_half_up
from app.data.city_environment import CITY_COORDINATES, Coordinates, estimate_for
from app.schemas.profile import EnvironmentalReading, EnvironmentSource

logger = structlog.get_logger()

SOURCE_WEATHER_LIVE = "Open-Meteo (Real-time)"
SOURCE_AQI_LIVE = "AQICN (Real-time)"
SOURCE_ESTIMATED = "Estimated (Historical Average)"


def is_known_city(city: str) -> bool:
    return city in CITY_COORDINATES


class EnvironmentService:

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    async def lookup(self, city: str) -> EnvironmentalReading:
        estimate = estimate_for(city)
        coords = CITY_COORDINATES.get(city)

        weather = None
        aqi = None
        if coords is not None:
            async with httpx.AsyncClient(
                timeout=self.settings.environment_timeout_seconds,
                transport=self._transport,
            ) as client:
                weather = await self._fetch_weather(client, city, coords)
                aqi = await self._fetch_aqi(client, city, coords)
        else:
            logger.info("environment_unknown_city", city=city)

        if aqi is None:
            logger.info("environment_aqi_estimated", city=city, aqi=estimate.aqi)

        return EnvironmentalReading(
            city=city,
            aqi=aqi if aqi is not None else estimate.aqi,
            temperature=weather[0] if weather else estimate.temperature,
            humidity=weather[1] if weather else estimate.humidity,
            source=EnvironmentSource(
                weather=SOURCE_WEATHER_LIVE if weather else SOURCE_ESTIMATED,
                aqi=SOURCE_AQI_LIVE if aqi is not None else SOURCE_ESTIMATED,
            ),
            timestamp=datetime.now(timezone.utc),
        )

    async def _fetch_weather(
        self,
        client: httpx.AsyncClient,
        city: str,
        coords: Coordinates,
    ) -> Optional[tuple[int, float]]:
        try:
            resp = await client.get(
                self.settings.open_meteo_url,
                params={
                    "latitude": coords.lat,
                    "longitude": coords.lon,
                    "current": "temperature_2m,relative_humidity_2m",
                    "timezone": "Asia/Kolkata",
                },
            )
            resp.raise_for_status()
            current = resp.json()["current"]
            return round_half_up(current["temperature_2m"]), float(current["relative_humidity_2m"])
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning("environment_weather_failed", city=city, error=str(e))
            return None

    async def _fetch_aqi(self, client: httpx.AsyncClient, city: str, coords: Coordinates) -> Optional[int]:
        token = self.settings.aqicn_api_key
        if not token:
            return None

        feeds = [
            f"{self.settings.waqi_url}/{city.lower()}/",
            f"{self.settings.waqi_url}/geo:{coords.lat};{coords.lon}/",
        ]
        for url in feeds:
            try:
                resp = await client.get(url, params={"token": token})
                if resp.status_code != 200:
                    continue
                payload = resp.json()
                aqi = payload.get("data", {}).get("aqi") if payload.get("status") == "ok" else None
                # WAQI reports "-" for stations without a current reading
                if isinstance(aqi, (int, float)) and aqi > 0:
                    logger.info("environment_aqi_live", city=city, aqi=aqi, feed=url)
                    return int(aqi)
            except (httpx.HTTPError, ValueError, AttributeError) as e:
                logger.warning("environment_aqi_failed", city=city, error=str(e))
        return None
