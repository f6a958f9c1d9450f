from .loader import ConfigError, load_catalog, load_config, parse_catalog
from .models import CatalogConfig, DiscountConfig, LoggingConfig, MovieConfig

__all__ = [
    "CatalogConfig",
    "ConfigError",
    "DiscountConfig",
    "LoggingConfig",
    "MovieConfig",
    "load_catalog",
    "load_config",
    "parse_catalog",
]
