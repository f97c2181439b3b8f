"""
Environment lookup against mocked Open-Meteo / WAQI endpoints.
"""
import httpx

from app.core.config import Settings
from app.services.environment import (
    SOURCE_AQI_LIVE,
    SOURCE_ESTIMATED,
    SOURCE_WEATHER_LIVE,
    EnvironmentService,
    is_known_city,
)

WEATHER_OK = {"current": {"temperature_2m": 31.5, "relative_humidity_2m": 48}}


def _service(handler, aqicn_api_key: str = "waqi-token") -> EnvironmentService:
    settings = Settings(aqicn_api_key=aqicn_api_key, environment_timeout_seconds=1.0)
    return EnvironmentService(settings, transport=httpx.MockTransport(handler))


class TestKnownCities:
    def test_supported(self):
        assert is_known_city("Delhi")
        assert not is_known_city("Atlantis")


class TestLiveData:
    async def test_both_sources_live(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "api.open-meteo.com":
                return httpx.Response(200, json=WEATHER_OK)
            assert request.url.params["token"] == "waqi-token"
            return httpx.Response(200, json={"status": "ok", "data": {"aqi": 187}})

        reading = await _service(handler).lookup("Delhi")

        assert reading.aqi == 187
        assert reading.temperature == 32
        assert reading.humidity == 48
        assert reading.source.weather == SOURCE_WEATHER_LIVE
        assert reading.source.aqi == SOURCE_AQI_LIVE
        assert reading.timestamp is not None

    async def test_geo_feed_used_when_city_feed_empty(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "api.open-meteo.com":
                return httpx.Response(200, json=WEATHER_OK)
            seen.append(request.url.path)
            if "geo:" in request.url.path:
                return httpx.Response(200, json={"status": "ok", "data": {"aqi": 142}})
            return httpx.Response(200, json={"status": "ok", "data": {"aqi": "-"}})

        reading = await _service(handler).lookup("Mumbai")
        assert reading.aqi == 142
        assert len(seen) == 2


class TestDegradation:
    async def test_all_sources_down(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        reading = await _service(handler).lookup("Delhi")
        assert reading.aqi == 220
        assert reading.temperature == 26
        assert reading.humidity == 55
        assert reading.source.weather == SOURCE_ESTIMATED
        assert reading.source.aqi == SOURCE_ESTIMATED

    async def test_connection_errors_degrade(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        reading = await _service(handler).lookup("Delhi")
        assert reading.aqi == 220

    async def test_no_key_skips_waqi(self):
        hosts = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            return httpx.Response(200, json=WEATHER_OK)

        reading = await _service(handler, aqicn_api_key="").lookup("Delhi")
        assert hosts == ["api.open-meteo.com"]
        assert reading.source.weather == SOURCE_WEATHER_LIVE
        assert reading.source.aqi == SOURCE_ESTIMATED

    async def test_malformed_weather(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "api.open-meteo.com":
                return httpx.Response(200, json={"unexpected": True})
            return httpx.Response(200, json={"status": "error", "data": "Unknown station"})

        reading = await _service(handler).lookup("Pune")
        assert reading.source.weather == SOURCE_ESTIMATED
        assert reading.source.aqi == SOURCE_ESTIMATED

    async def test_unknown_city_uses_default_estimate(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        reading = await _service(handler).lookup("Atlantis")
        assert (reading.aqi, reading.temperature, reading.humidity) == (150, 28, 60)
