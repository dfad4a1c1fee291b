"""API configuration adapter.

Bridges the centralized techcare_config settings with the API layer.
"""

from functools import lru_cache

from techcare_config.settings import Settings, get_settings


@lru_cache
def get_api_settings() -> Settings:
    """Get settings from centralized configuration.

    ``create_app(settings)`` overrides this dependency when it is given
    explicit settings.
    """
    return get_settings()


API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"
