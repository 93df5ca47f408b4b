"""Flesch-Kincaid grade level and Flesch reading score.

Formulas (Flesch, 1948; Kincaid et al., 1975):

    grade = 0.39 · (words / sentences) + 11.8 · (syllables / words) - 15.59
    score = 206.835 - 1.015 · (words / sentences) - 84.6 · (syllables / words)

Corpus averages are computed per text and then averaged. Pooling the
sentence, word and syllable counts of all texts first gives a different
number and is not what these functions return.
"""

import dataclasses
import logging
from collections.abc import Callable, Sequence

import numpy as np

from notilytics.data import Article, Readability, ReadabilityAverages
from notilytics.text import count_sentences, count_syllables, count_words

logger = logging.getLogger(__name__)


def flesch_kincaid_grade(sentences: int, words: int, syllables: int) -> float:
    """U.S. school grade needed to understand the text; 0.0 for empty counts."""
    if sentences == 0 or words == 0:
        return 0.0
    return 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59


def flesch_reading_score(sentences: int, words: int, syllables: int) -> float:
    """Reading ease (higher is easier); 0.0 for empty counts."""
    if sentences == 0 or words == 0:
        return 0.0
    return 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)


def compute_readability(text: str | None) -> Readability:
    """Compute both readability metrics for one text.

    Args:
        text: Text to analyze. ``None`` and blank text yield zero metrics.

    Returns:
        Readability with grade and score.
    """
    sentences = count_sentences(text)
    words = count_words(text)
    syllables = count_syllables(text)
    return Readability(
        grade=flesch_kincaid_grade(sentences, words, syllables),
        score=flesch_reading_score(sentences, words, syllables),
    )


def _average(texts: Sequence[str | None], metric: Callable[[Readability], float]) -> float:
    if not texts:
        return 0.0
    values = np.array([metric(compute_readability(t)) for t in texts], dtype=float)
    return float(values.mean())


def average_grade(texts: Sequence[str | None]) -> float:
    """Mean of the per-text grade levels; 0.0 for an empty corpus."""
    return _average(texts, lambda r: r.grade)


def average_score(texts: Sequence[str | None]) -> float:
    """Mean of the per-text reading scores; 0.0 for an empty corpus."""
    return _average(texts, lambda r: r.score)


def average_readability(texts: Sequence[str | None]) -> ReadabilityAverages:
    """Compute both corpus averages.

    Args:
        texts: Texts to analyze, typically article titles.

    Returns:
        ReadabilityAverages with the mean grade and mean score.
    """
    if not texts:
        return ReadabilityAverages()
    per_text = [compute_readability(t) for t in texts]
    grades = np.array([r.grade for r in per_text], dtype=float)
    scores = np.array([r.score for r in per_text], dtype=float)
    return ReadabilityAverages(avg_grade=float(grades.mean()), avg_score=float(scores.mean()))


def score_article(article: Article) -> Article:
    """Return a copy of ``article`` with its rounded readability metrics filled in.

    The description is scored; articles without one fall back to the title.
    """
    text = article.description if article.description else article.title
    readability = compute_readability(text)
    logger.debug(
        f"Scored {article.url}: grade={readability.grade:.2f} score={readability.score:.2f}"
    )
    return dataclasses.replace(
        article,
        kincaid_grade=round(readability.grade),
        reading_score=round(readability.score),
    )
