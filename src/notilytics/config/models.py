"""Pydantic configuration models for Notilytics components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Store Configs
# ============================================================


class InMemoryStoreConfig(BaseModel):
    """Unbounded insertion-ordered store (results are never evicted)."""

    type: Literal["memory"] = "memory"

    model_config = {"frozen": True}


class LRUStoreConfig(BaseModel):
    """Capacity-bounded store with least-recently-used eviction."""

    type: Literal["lru"] = "lru"
    capacity: int = Field(default=100, ge=1)

    model_config = {"frozen": True}


StoreConfig = Annotated[
    InMemoryStoreConfig | LRUStoreConfig,
    Field(discriminator="type"),
]


# ============================================================
# History Config
# ============================================================


class HistoryConfig(BaseModel):
    """Cap on remembered queries per session and on visible results."""

    cap: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Stats Config
# ============================================================


class StatsConfig(BaseModel):
    """Configuration for word-frequency statistics."""

    min_token_length: int = Field(default=3, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Log level applied by the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NotilyticsConfig(BaseModel):
    """Root configuration for Notilytics."""

    store: InMemoryStoreConfig | LRUStoreConfig = Field(
        default_factory=InMemoryStoreConfig, discriminator="type"
    )
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
