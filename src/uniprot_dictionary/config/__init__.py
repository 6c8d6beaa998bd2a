from .loader import load_config, load_config_with_overrides
from .schema import APIConfig, DictionaryConfig, QUERY_PLACEHOLDER

__all__ = [
    "load_config",
    "load_config_with_overrides",
    "DictionaryConfig",
    "APIConfig",
    "QUERY_PLACEHOLDER",
]
