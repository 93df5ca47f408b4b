"""Query result storage module."""

from notilytics.store.base import ResultStore
from notilytics.store.memory import InMemoryResultStore, LRUResultStore

__all__ = [
    "InMemoryResultStore",
    "LRUResultStore",
    "ResultStore",
]
