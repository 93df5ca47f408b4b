"""Notilytics: readability and word statistics for news search results."""

from notilytics.config import NotilyticsConfig, create_from_config, load_config
from notilytics.data import (
    Article,
    QueryResult,
    Readability,
    ReadabilityAverages,
    SourceProfile,
)
from notilytics.history import RecentQueryList, touch_history
from notilytics.profile import build_source_profile
from notilytics.readability import (
    average_grade,
    average_readability,
    average_score,
    compute_readability,
    flesch_kincaid_grade,
    flesch_reading_score,
    score_article,
)
from notilytics.service import SearchService, record_search, visible_results
from notilytics.stats import stats_summary, word_frequency_report
from notilytics.store import InMemoryResultStore, LRUResultStore, ResultStore
from notilytics.text import (
    count_sentences,
    count_syllables,
    count_words,
    estimate_syllables,
    split_sentences,
    split_words,
)

__all__ = [
    # Models
    "Article",
    "QueryResult",
    "Readability",
    "ReadabilityAverages",
    "SourceProfile",
    # Text
    "count_sentences",
    "count_syllables",
    "count_words",
    "estimate_syllables",
    "split_sentences",
    "split_words",
    # Readability
    "average_grade",
    "average_readability",
    "average_score",
    "compute_readability",
    "flesch_kincaid_grade",
    "flesch_reading_score",
    "score_article",
    # Statistics
    "stats_summary",
    "word_frequency_report",
    # Stores
    "InMemoryResultStore",
    "LRUResultStore",
    "ResultStore",
    # History
    "RecentQueryList",
    "touch_history",
    # Service
    "SearchService",
    "record_search",
    "visible_results",
    # Profiles
    "build_source_profile",
    # Config
    "NotilyticsConfig",
    "create_from_config",
    "load_config",
]
