"""Word-frequency statistics over article titles and descriptions."""

from collections import Counter
from collections.abc import Iterable

from notilytics.data import QueryResult

DEFAULT_MIN_LENGTH = 3


def _normalize(token: str) -> str:
    return "".join(ch for ch in token if ch.isalpha()).lower()


def extract_words(texts: Iterable[str | None]) -> list[str]:
    """Split texts on whitespace and normalize each token to lowercase letters.

    Tokens with no letters normalize to ``""`` and are kept here; they are
    removed by ``filter_words``.
    """
    return [_normalize(token) for text in texts if text for token in text.split()]


def filter_words(words: Iterable[str], min_length: int = DEFAULT_MIN_LENGTH) -> list[str]:
    """Drop short, mostly uninformative words ("a", "is", "of")."""
    return [w for w in words if w and len(w) >= min_length]


def count_words(words: Iterable[str]) -> Counter[str]:
    return Counter(words)


def render_counts(counter: Counter[str]) -> str:
    """Render counts as ``word:count`` lines, highest count first.

    Ties keep first-seen order.
    """
    return "\n".join(f"{word}:{count}" for word, count in counter.most_common())


def word_frequency_report(
    texts: Iterable[str | None], *, min_length: int = DEFAULT_MIN_LENGTH
) -> str:
    """Build the word-frequency report for a batch of texts.

    Args:
        texts: Texts to count words in.
        min_length: Shortest word length kept in the report.

    Returns:
        Newline-joined ``word:count`` lines sorted by descending count.
    """
    return render_counts(count_words(filter_words(extract_words(texts), min_length)))


def stats_summary(result: QueryResult, *, min_length: int = DEFAULT_MIN_LENGTH) -> str:
    """Word statistics for one stored search over its titles and descriptions."""
    report = word_frequency_report(result.titles + result.descriptions, min_length=min_length)
    return (
        "More Statistics:\n"
        f"{len(result.articles)} articles have been taken into account.\n"
        f"{report}"
    )
