"""Weather value objects — a parsed current-weather report and the lookup outcome."""

from pydantic import BaseModel, ConfigDict


class WeatherReport(BaseModel):
    """Current conditions for one city. Any field may be missing upstream."""

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    description: str | None = None
    temperature: float | None = None
    humidity: int | None = None
    wind_speed: float | None = None

    def summary(self) -> str:
        temperature = f"{self.temperature:.2f}" if self.temperature is not None else ""
        humidity = self.humidity if self.humidity is not None else ""
        wind_speed = _plain_number(self.wind_speed) if self.wind_speed is not None else ""
        return (
            f"In {self.city or ''}, the weather currently: {self.description or ''}."
            f" The temperature is {temperature}°C."
            f" The humidity is {humidity}% and the wind speed is {wind_speed} m/s."
        )


def _plain_number(value: float) -> str:
    """Render 3.0 as "3" and 4.1 as "4.1"."""
    return str(int(value)) if value.is_integer() else str(value)


class WeatherResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    report: WeatherReport | None = None
