"""Structlog implementation of the WeatherObserver port."""

import structlog


class StructlogWeatherObserver:
    """Delegates weather domain events to structlog.

    Satisfies the WeatherObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def weather_config_missing(self, city: str) -> None:
        self._log.error("weather.config_missing", city=city)

    def weather_payload_invalid(self, city: str, reason: str) -> None:
        self._log.error("weather.payload_invalid", city=city, reason=reason)

    def weather_fetched(self, city: str, message: str) -> None:
        self._log.info("weather.fetched", city=city, message=message)
