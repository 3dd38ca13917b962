"""WeatherObserver port — domain events emitted during weather lookups."""

from typing import Protocol


class WeatherObserver(Protocol):
    def weather_config_missing(self, city: str) -> None: ...

    def weather_payload_invalid(self, city: str, reason: str) -> None: ...

    def weather_fetched(self, city: str, message: str) -> None: ...
