"""Weather lookup configuration model."""

from pydantic import BaseModel


class WeatherConfig(BaseModel, frozen=True):
    # api_url is a prefix the url-escaped city is appended to, e.g. ".../weather?q="
    api_url: str = ""
    api_key: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.api_url.strip()) and bool(self.api_key.strip())
