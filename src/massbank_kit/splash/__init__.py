"""Optional SPLASH checksum verification.

The checksum comes from an external web service. The service is never
allowed to fail validation: unreachable, slow or erroring services mean
"skip the check".
"""

from .base import SplashClient
from .config import DEFAULT_SPLASH_API_URL, SplashConfig
from .factory import create_splash_client
from .http_client import HttpSplashClient
from .validator import SplashValidator

__all__ = [
    "DEFAULT_SPLASH_API_URL",
    "HttpSplashClient",
    "SplashClient",
    "SplashConfig",
    "SplashValidator",
    "create_splash_client",
]
