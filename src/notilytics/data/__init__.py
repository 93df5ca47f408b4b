"""Data models for Notilytics."""

from notilytics.data.models import (
    Article,
    QueryResult,
    Readability,
    ReadabilityAverages,
    SourceProfile,
)

__all__ = [
    "Article",
    "QueryResult",
    "Readability",
    "ReadabilityAverages",
    "SourceProfile",
]
