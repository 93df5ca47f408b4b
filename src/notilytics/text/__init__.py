"""Text tokenization and syllable estimation."""

from notilytics.text.syllables import count_syllables, estimate_syllables
from notilytics.text.tokenizer import (
    count_sentences,
    count_words,
    split_sentences,
    split_words,
)

__all__ = [
    "count_sentences",
    "count_syllables",
    "count_words",
    "estimate_syllables",
    "split_sentences",
    "split_words",
]
