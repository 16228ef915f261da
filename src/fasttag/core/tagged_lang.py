# src/fasttag/core/tagged_lang.py
"""
Text format for tagged sentences.

One token per line:
  [word tag]

"[ ]" is an empty word with an empty tag.
"""

from fasttag.core.tagger import TaggedToken


def format_token(token: TaggedToken) -> str:
    return f"[{token.word} {token.tag}]"


def format_tagged(tokens: list[TaggedToken]) -> str:
    return "\n".join(format_token(t) for t in tokens)
