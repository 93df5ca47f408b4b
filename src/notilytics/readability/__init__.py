"""Readability scoring module."""

from notilytics.readability.flesch import (
    average_grade,
    average_readability,
    average_score,
    compute_readability,
    flesch_kincaid_grade,
    flesch_reading_score,
    score_article,
)

__all__ = [
    "average_grade",
    "average_readability",
    "average_score",
    "compute_readability",
    "flesch_kincaid_grade",
    "flesch_reading_score",
    "score_article",
]
