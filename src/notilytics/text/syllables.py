"""Vowel-group syllable estimation."""

import re

from notilytics.text.tokenizer import split_words

VOWELS = frozenset("aeiouy")

_NON_LETTER = re.compile(r"[^a-z]")


def estimate_syllables(word: str | None) -> int:
    """Estimate the syllable count of a single word.

    Algorithm:
        1. Lowercase and drop everything outside ``a``-``z``.
        2. Count contiguous vowel groups (``a e i o u y``).
        3. Drop one for a silent trailing ``e`` when more than one group was
           found, except for consonant + ``le`` endings ("lit-tle").
        4. Clamp to at least one syllable.

    Args:
        word: The word to analyze.

    Returns:
        Estimated syllables, or 0 when nothing of the word is left after
        normalization.
    """
    if not word:
        return 0
    word = _NON_LETTER.sub("", word.lower())
    if not word:
        return 0

    count = 0
    prev_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel

    if word.endswith("e") and count > 1:
        consonant_le = len(word) >= 3 and word.endswith("le") and word[-3] not in VOWELS
        if not consonant_le:
            count -= 1

    return max(count, 1)


def count_syllables(text: str | None) -> int:
    """Sum of estimated syllables over every word in ``text``."""
    return sum(estimate_syllables(w) for w in split_words(text))
