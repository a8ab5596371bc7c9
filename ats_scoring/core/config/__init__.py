from .scoring import clear_scoring_config_cache, get_scoring_config, get_scoring_value
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "get_scoring_config",
    "get_scoring_value",
    "clear_scoring_config_cache",
]
