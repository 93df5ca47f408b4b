"""Factory functions to create components from configuration."""

from notilytics.config.models import InMemoryStoreConfig, LRUStoreConfig, NotilyticsConfig
from notilytics.service import SearchService
from notilytics.store import InMemoryResultStore, LRUResultStore, ResultStore


def create_store(config: InMemoryStoreConfig | LRUStoreConfig) -> ResultStore:
    """Create a result store from config."""
    if isinstance(config, InMemoryStoreConfig):
        return InMemoryResultStore()
    if isinstance(config, LRUStoreConfig):
        return LRUResultStore(capacity=config.capacity)
    msg = f"Unknown store config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: NotilyticsConfig,
    *,
    store: ResultStore | None = None,
) -> SearchService:
    """Create a search service from root config.

    Args:
        config: Root configuration.
        store: Existing store to share instead of creating one from config.

    Returns:
        SearchService bound to the store.
    """
    return SearchService(
        store if store is not None else create_store(config.store),
        history_cap=config.history.cap,
        min_token_length=config.stats.min_token_length,
    )
