# src/fasttag/core/tagger.py
"""
Rule-based part-of-speech tagger.

Two stages:
  1. lookup: each token gets its default tag from the lexicon
     (exact case, then lowercase, then "<char>^" for single characters,
     then "NN")
  2. rules: contextual rules refine the tags left to right

Tagger instances only read the lexicon, so one can serve many callers.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from fasttag.core.lexicon import Lexicon
from fasttag.core.rules import RULES, Rule, apply_rules
from fasttag.core.tokenize import split_sentence, strip_token


log = logging.getLogger(__name__)

DEFAULT_TAG = "NN"
SENTINEL_SUFFIX = "^"


@dataclass(frozen=True)
class TaggedToken:
    word: str  # token exactly as supplied
    tag: str

    def to_dict(self) -> dict:
        return {"word": self.word, "tag": self.tag}


class Tagger:
    def __init__(self, lexicon: Lexicon, rules: list[Rule] | None = None):
        self.lexicon = lexicon
        self.rules = list(RULES if rules is None else rules)

    def _resolve(self, token: str) -> tuple[str, bool]:
        """
        Returns (provisional tag, final).

        Final tags (empty word, unknown single character) skip the rules.
        """
        word = strip_token(token)
        if not word:
            return "", True

        tag = self.lexicon.primary_tag(word)
        if tag is not None:
            return tag, False

        if len(word) == 1:
            return word + SENTINEL_SUFFIX, True

        return DEFAULT_TAG, False

    def lookup(self, token: str) -> str:
        """Provisional tag for a single token, before any rule runs."""
        tag, _ = self._resolve(token)
        return tag

    def tag(self, tokens: Sequence[str] | None) -> list[TaggedToken]:
        if not tokens:
            return []

        result = []
        prev_tag = None
        prev_word = None

        for word in tokens:
            tag, final = self._resolve(word)
            if not final:
                tag = apply_rules(prev_tag, prev_word, word, tag, self.rules)

            result.append(TaggedToken(word, tag))
            prev_tag = tag
            prev_word = word

        log.debug("tagged %d tokens", len(result))
        return result

    def tag_sentence(self, text: str | None) -> list[TaggedToken]:
        return self.tag(split_sentence(text))
