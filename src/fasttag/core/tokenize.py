# src/fasttag/core/tokenize.py
"""
Token helpers for the tagger.

Stage 1: sentence → tokens (split on single spaces)
Stage 2: token → lookup word (edge punctuation stripped)
"""

import string


WORD_CHARS = frozenset(string.ascii_letters + string.digits)


def split_sentence(text: str | None) -> list[str]:
    """Split on the space character only. Consecutive spaces give empty tokens."""
    if not text:
        return []
    return text.split(" ")


def strip_token(token: str) -> str:
    """Trim characters outside [A-Za-z0-9] from both ends of a token."""
    if len(token) == 1:
        return token

    start = 0
    end = len(token)
    while start < end and token[start] not in WORD_CHARS:
        start += 1
    while end > start and token[end - 1] not in WORD_CHARS:
        end -= 1
    return token[start:end]
