"""Tests for Flesch-Kincaid grade and Flesch reading score."""

import pytest

from notilytics.data import Article, Readability, ReadabilityAverages
from notilytics.readability import (
    average_grade,
    average_readability,
    average_score,
    compute_readability,
    flesch_kincaid_grade,
    flesch_reading_score,
    score_article,
)
from notilytics.text import count_sentences, count_syllables, count_words

SIMPLE = "This is a simple sentence."  # 1 sentence, 5 words, 7 syllables
EASY = "Easy text."  # 1 sentence, 2 words, 3 syllables

# -- Formula tests --


def test_grade_simple_sentence() -> None:
    expected = 0.39 * (5 / 1) + 11.8 * (7 / 5) - 15.59
    assert compute_readability(SIMPLE).grade == pytest.approx(expected, abs=0.01)


def test_score_simple_sentence() -> None:
    expected = 206.835 - 1.015 * (5 / 1) - 84.6 * (7 / 5)
    assert compute_readability(SIMPLE).score == pytest.approx(expected, abs=0.01)


def test_formulas_from_counts() -> None:
    assert flesch_kincaid_grade(2, 10, 15) == pytest.approx(0.39 * 5 + 11.8 * 1.5 - 15.59)
    assert flesch_reading_score(2, 10, 15) == pytest.approx(206.835 - 1.015 * 5 - 84.6 * 1.5)


def test_zero_counts_short_circuit() -> None:
    assert flesch_kincaid_grade(0, 5, 7) == 0.0
    assert flesch_kincaid_grade(1, 0, 0) == 0.0
    assert flesch_reading_score(0, 5, 7) == 0.0
    assert flesch_reading_score(1, 0, 0) == 0.0


def test_empty_and_none_text() -> None:
    assert compute_readability("") == Readability(grade=0.0, score=0.0)
    assert compute_readability(None) == Readability(grade=0.0, score=0.0)


def test_punctuation_only_text() -> None:
    assert compute_readability("?!... 42") == Readability(grade=0.0, score=0.0)


def test_complex_sentence_is_positive() -> None:
    text = (
        "Although the rain was heavy, the children continued to play outside, "
        "undeterred by the weather."
    )
    result = compute_readability(text)
    assert result.grade > 0
    assert result.score > 0


# -- Averaging tests --


def test_average_grade_is_mean_of_per_text_grades() -> None:
    g1 = compute_readability(EASY).grade
    g2 = compute_readability(SIMPLE).grade
    assert average_grade([EASY, SIMPLE]) == pytest.approx((g1 + g2) / 2)


def test_average_score_is_mean_of_per_text_scores() -> None:
    s1 = compute_readability(EASY).score
    s2 = compute_readability(SIMPLE).score
    assert average_score([EASY, SIMPLE]) == pytest.approx((s1 + s2) / 2)


def test_average_is_not_computed_from_pooled_counts() -> None:
    texts = [EASY, SIMPLE]
    pooled = flesch_kincaid_grade(
        sum(count_sentences(t) for t in texts),
        sum(count_words(t) for t in texts),
        sum(count_syllables(t) for t in texts),
    )
    assert abs(average_grade(texts) - pooled) > 0.01


def test_average_empty_corpus() -> None:
    assert average_grade([]) == 0.0
    assert average_score([]) == 0.0
    assert average_readability([]) == ReadabilityAverages(avg_grade=0.0, avg_score=0.0)


def test_average_of_blank_text() -> None:
    assert average_grade([""]) == 0.0
    assert average_score([""]) == 0.0


def test_average_readability_matches_individual_averages() -> None:
    texts = [EASY, SIMPLE, ""]
    result = average_readability(texts)
    assert result.avg_grade == pytest.approx(average_grade(texts))
    assert result.avg_score == pytest.approx(average_score(texts))


# -- Article scoring tests --


def test_score_article_uses_description() -> None:
    article = Article(url="https://a.com/1", title="Ignored title words", description=SIMPLE)
    scored = score_article(article)
    assert scored.kincaid_grade == 3  # 2.88
    assert scored.reading_score == 83  # 83.32
    assert scored.title == article.title
    assert article.kincaid_grade == 0


def test_score_article_falls_back_to_title() -> None:
    scored = score_article(Article(url="https://a.com/2", title=EASY))
    assert scored.kincaid_grade == 3  # 2.89
    assert scored.reading_score == 78  # 77.905


def test_score_article_without_text() -> None:
    scored = score_article(Article(url="https://a.com/3"))
    assert scored.kincaid_grade == 0
    assert scored.reading_score == 0


def test_leading_terminator_counts_as_a_sentence() -> None:
    # 2 sentences, 2 words, 2 syllables
    result = compute_readability("...And then")
    assert result.grade == pytest.approx(0.39 * 1 + 11.8 * 1 - 15.59)
    assert result.score == pytest.approx(206.835 - 1.015 * 1 - 84.6 * 1)
