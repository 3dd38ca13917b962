"""Tests for WeatherService — the second consumer of Transport."""

import json

import pytest

from n8n_bridge.config.domain.weather import WeatherConfig
from n8n_bridge.transport.domain.result import TransportResult
from n8n_bridge.weather.application.service import MISSING_CONFIG_MESSAGE, WeatherService
from n8n_bridge.weather.domain.report import WeatherReport
from tests.transport.fake_transport import FakeTransport
from tests.weather.fake_observer import FakeWeatherObserver

_CONFIG = WeatherConfig(
    api_url="https://api.openweathermap.org/data/2.5/weather?q=", api_key="owm"
)

_BERLIN = {
    "name": "Berlin",
    "weather": [{"description": "light rain"}],
    "main": {"temp": 21.5, "humidity": 81},
    "wind": {"speed": 4.1},
}


def _make_service(
    result: TransportResult,
) -> tuple[WeatherService, FakeTransport, FakeWeatherObserver]:
    transport = FakeTransport(result=result)
    observer = FakeWeatherObserver()
    return WeatherService(transport=transport, observer=observer), transport, observer


class TestConfiguration:
    @pytest.mark.parametrize(
        "config",
        [WeatherConfig(), WeatherConfig(api_url="https://x?q=", api_key="")],
    )
    async def test_missing_config_fails_without_request(self, config: WeatherConfig) -> None:
        service, transport, observer = _make_service(
            TransportResult(success=True, content="{}")
        )

        result = await service.get_weather(city="Berlin", config=config)

        assert result.success is False
        assert result.message == MISSING_CONFIG_MESSAGE
        assert result.report is None
        assert transport.sent == []
        assert observer.config_missing == ["Berlin"]


class TestRequest:
    async def test_builds_escaped_url(self) -> None:
        service, transport, _ = _make_service(
            TransportResult(success=True, content=json.dumps(_BERLIN))
        )

        await service.get_weather(city="New York", config=_CONFIG)

        assert transport.sent[0].resource == (
            "https://api.openweathermap.org/data/2.5/weather?q=New%20York"
            "&units=metric&appid=owm"
        )
        assert transport.sent[0].method == "GET"
        assert transport.sent[0].error_message == (
            "get_weather: Failed to fetch weather data for city 'New York'."
        )


class TestSuccess:
    async def test_renders_summary(self) -> None:
        service, _, observer = _make_service(
            TransportResult(success=True, content=json.dumps(_BERLIN))
        )

        result = await service.get_weather(city="Berlin", config=_CONFIG)

        assert result.success is True
        assert result.message == (
            "In Berlin, the weather currently: light rain. The temperature is"
            " 21.50°C. The humidity is 81% and the wind speed is 4.1 m/s."
        )
        assert result.report == WeatherReport(
            city="Berlin",
            description="light rain",
            temperature=21.5,
            humidity=81,
            wind_speed=4.1,
        )
        assert observer.fetched[0]["city"] == "Berlin"

    async def test_whole_wind_speed_has_no_decimal_point(self) -> None:
        body = json.dumps({"name": "Oslo", "wind": {"speed": 3}})
        service, _, _ = _make_service(TransportResult(success=True, content=body))

        result = await service.get_weather(city="Oslo", config=_CONFIG)

        assert result.message.endswith("the wind speed is 3 m/s.")

    async def test_missing_fields_render_blank(self) -> None:
        service, _, _ = _make_service(
            TransportResult(success=True, content='{"name": "Nowhere"}')
        )

        result = await service.get_weather(city="Nowhere", config=_CONFIG)

        assert result.success is True
        assert result.report == WeatherReport(city="Nowhere")


class TestFailure:
    async def test_transport_failure_passes_diagnostic(self) -> None:
        diagnostic = "StatusCode: 404 (NotFound) | get_weather: Failed"
        service, _, _ = _make_service(TransportResult(success=False, content=diagnostic))

        result = await service.get_weather(city="Atlantis", config=_CONFIG)

        assert result.success is False
        assert result.message == diagnostic

    @pytest.mark.parametrize("body", ["not json", "[1, 2]", ""])
    async def test_unreadable_payload(self, body: str) -> None:
        service, _, observer = _make_service(TransportResult(success=True, content=body))

        result = await service.get_weather(city="Berlin", config=_CONFIG)

        assert result.success is False
        assert result.message == "Could not read weather data for city 'Berlin'."
        assert len(observer.payload_invalid) == 1

    async def test_wrongly_typed_field(self) -> None:
        body = json.dumps({"name": "Berlin", "main": {"humidity": "damp"}})
        service, _, observer = _make_service(TransportResult(success=True, content=body))

        result = await service.get_weather(city="Berlin", config=_CONFIG)

        assert result.success is False
        assert len(observer.payload_invalid) == 1
