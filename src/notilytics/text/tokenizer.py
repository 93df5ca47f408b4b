"""Pattern-based sentence and word splitting.

No dictionary or locale awareness: sentences end at runs of ``.``, ``!`` or
``?`` and words are ASCII letter runs with at most one apostrophe-joined
suffix (``don't``, ``it's``).
"""

import re

SENTENCE_PATTERN = re.compile(r"[.!?]+\s*")
WORD_PATTERN = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?")


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def split_sentences(text: str | None) -> list[str]:
    """Split text into sentence fragments.

    Args:
        text: Input text. ``None`` is treated as empty.

    Returns:
        Fragments between sentence terminators. Leading and interior empty
        fragments are kept ("...And then" is two sentences); trailing ones
        are dropped.
    """
    if _is_blank(text):
        return []
    parts = SENTENCE_PATTERN.split(text.strip())
    while parts and not parts[-1]:
        parts.pop()
    return parts


def split_words(text: str | None) -> list[str]:
    """Return the words of ``text``; digits and punctuation are not words."""
    if _is_blank(text):
        return []
    return WORD_PATTERN.findall(text)


def count_sentences(text: str | None) -> int:
    return len(split_sentences(text))


def count_words(text: str | None) -> int:
    return len(split_words(text))
