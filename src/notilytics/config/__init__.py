"""Configuration module for Notilytics."""

from notilytics.config.factory import create_from_config, create_store
from notilytics.config.loader import get_default_config_path, load_config
from notilytics.config.models import (
    HistoryConfig,
    InMemoryStoreConfig,
    LoggingConfig,
    LRUStoreConfig,
    NotilyticsConfig,
    StatsConfig,
    StoreConfig,
)

__all__ = [
    "HistoryConfig",
    "InMemoryStoreConfig",
    "LRUStoreConfig",
    "LoggingConfig",
    "NotilyticsConfig",
    "StatsConfig",
    "StoreConfig",
    "create_from_config",
    "create_store",
    "get_default_config_path",
    "load_config",
]
