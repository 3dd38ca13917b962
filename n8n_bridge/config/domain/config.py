"""Top-level BotConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from n8n_bridge.config.domain.agent import AgentConfig
from n8n_bridge.config.domain.weather import WeatherConfig


class BotConfig(BaseModel, frozen=True):
    """Root configuration aggregate for the bot front end."""

    agent: AgentConfig = Field(default_factory=AgentConfig)
    weather: WeatherConfig = Field(default_factory=WeatherConfig)
