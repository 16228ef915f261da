# src/fasttag/core/rules.py
"""
Contextual transformation rules.

Each rule is a pure function:

    rule(prev_tag, prev_word, word, tag) -> tag

  prev_tag:  final tag of the previous token (None at sentence start)
  prev_word: previous token as supplied (None at sentence start)
  word:      current token as supplied
  tag:       current tag, after the rules before this one

Rules run in RULES order for each token before moving on to the next one.
"""

import re
from typing import Callable


Rule = Callable[[str | None, str | None, str, str], str]

GROUPED_NUMBER = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")


def is_number(word: str) -> bool:
    """float() syntax (NaN and Infinity included), plus 1,000-style grouping."""
    if GROUPED_NUMBER.match(word):
        word = word.replace(",", "")
    try:
        float(word)
    except ValueError:
        return False
    return True


def determiner_verb_to_noun(prev_tag, prev_word, word, tag):
    """DT, {VBD | VBP | VB} → DT, NN"""
    if prev_tag == "DT" and tag in ("VBD", "VBP", "VB"):
        return "NN"
    return tag


def noun_to_number(prev_tag, prev_word, word, tag):
    """Noun containing "." or parsing as a number → CD"""
    if tag.startswith("N") and ("." in word or is_number(word)):
        return "CD"
    return tag


def noun_to_past_participle(prev_tag, prev_word, word, tag):
    """Noun ending in "ed" → VBN"""
    if tag.startswith("N") and word.endswith("ed"):
        return "VBN"
    return tag


def ly_to_adverb(prev_tag, prev_word, word, tag):
    """Anything ending in "ly" → RB"""
    if word.endswith("ly"):
        return "RB"
    return tag


def noun_to_adjective(prev_tag, prev_word, word, tag):
    """Common noun ending in "al" → JJ"""
    if tag.startswith("NN") and word.endswith("al"):
        return "JJ"
    return tag


def would_noun_to_verb(prev_tag, prev_word, word, tag):
    """Noun after "would" → VB"""
    if prev_word == "would" and tag.startswith("NN"):
        return "VB"
    return tag


def noun_to_plural(prev_tag, prev_word, word, tag):
    """NN ending in "s" → NNS"""
    if tag == "NN" and word.endswith("s"):
        return "NNS"
    return tag


def noun_to_gerund(prev_tag, prev_word, word, tag):
    """Common noun ending in "ing" → VBG"""
    if tag.startswith("NN") and word.endswith("ing"):
        return "VBG"
    return tag


RULES: list[Rule] = [
    determiner_verb_to_noun,
    noun_to_number,
    noun_to_past_participle,
    ly_to_adverb,
    noun_to_adjective,
    would_noun_to_verb,
    noun_to_plural,
    noun_to_gerund,
]


def apply_rules(
    prev_tag: str | None,
    prev_word: str | None,
    word: str,
    tag: str,
    rules: list[Rule] = RULES,
) -> str:
    for rule in rules:
        tag = rule(prev_tag, prev_word, word, tag)
    return tag
