import math
import re

SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')
PARAGRAPH_SPLIT_RE = re.compile(r'\n\n+')


def split_words(text: str) -> list:
    """Whitespace tokenization; never returns empty tokens."""
    return text.split()


def split_sentences(text: str) -> list:
    """Split on runs of terminal punctuation, trimming and dropping blank fragments."""
    return [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> list:
    # Keeps blank paragraphs; callers decide what to do with them
    return PARAGRAPH_SPLIT_RE.split(text)


def round_half_up(value: float) -> int:
    # Trim float noise first so 32.4999999 rounds like 32.5
    return int(math.floor(round(value, 6) + 0.5))


def clamp(value, lower, upper):
    return max(lower, min(upper, value))
