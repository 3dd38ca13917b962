"""WeatherService — current-weather lookup against the OpenWeatherMap API."""

import json
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from n8n_bridge.config.domain.weather import WeatherConfig
from n8n_bridge.transport.domain.transport import Transport
from n8n_bridge.weather.domain.observer import WeatherObserver
from n8n_bridge.weather.domain.report import WeatherReport, WeatherResult

MISSING_CONFIG_MESSAGE = (
    "No OpenWeatherMap Api Key/Url was provided, please contact the Developer to"
    " add a valid Api Key/Url!"
)


class WeatherService:
    def __init__(self, transport: Transport, observer: WeatherObserver) -> None:
        self._transport = transport
        self._observer = observer

    async def get_weather(self, city: str, config: WeatherConfig) -> WeatherResult:
        """Fetch current weather for city and render a one-line summary.

        Never raises; failures come back as an unsuccessful WeatherResult.
        """
        if not config.is_complete:
            self._observer.weather_config_missing(city=city)
            return WeatherResult(success=False, message=MISSING_CONFIG_MESSAGE)

        response = await self._transport.send(
            f"{config.api_url}{quote(city, safe='')}&units=metric&appid={config.api_key}",
            method="GET",
            error_message=f"get_weather: Failed to fetch weather data for city '{city}'.",
        )
        if not response.success:
            return WeatherResult(success=False, message=response.content or "")

        try:
            report = _parse_report(response.content or "")
        except (ValueError, ValidationError) as exc:
            self._observer.weather_payload_invalid(city=city, reason=str(exc))
            return WeatherResult(
                success=False, message=f"Could not read weather data for city '{city}'."
            )

        message = report.summary()
        self._observer.weather_fetched(city=city, message=message)
        return WeatherResult(success=True, message=message, report=report)


def _parse_report(body: str) -> WeatherReport:
    """Map an OpenWeatherMap current-weather payload onto a WeatherReport.

    Raises:
        ValueError: if the body is not a JSON object.
        pydantic.ValidationError: if a field has an unusable type.
    """
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("weather payload is not a JSON object")

    conditions = _first(data.get("weather"))
    main = _mapping(data.get("main"))
    wind = _mapping(data.get("wind"))
    return WeatherReport(
        city=data.get("name"),
        description=_mapping(conditions).get("description"),
        temperature=main.get("temp"),
        humidity=main.get("humidity"),
        wind_speed=wind.get("speed"),
    )


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}
