# src/massbank_kit/splash/config.py

from pydantic import BaseModel, Field

DEFAULT_SPLASH_API_URL = "https://splash.fiehnlab.ucdavis.edu/splash/it"


class SplashConfig(BaseModel):
    """Settings for the SPLASH web service.

    Immutable. ``timeout`` bounds every request so a slow service can
    never stall validation.
    """

    api_url: str = DEFAULT_SPLASH_API_URL
    timeout: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=3, ge=1)

    class Config:
        extra = "forbid"
        frozen = True
