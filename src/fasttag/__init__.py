"""
fasttag: lexicon + transformation-rule part-of-speech tagger.
"""

from fasttag.core.lexicon import Lexicon
from fasttag.core.tagger import TaggedToken, Tagger

__all__ = ["Lexicon", "TaggedToken", "Tagger"]
__version__ = "0.1.0"
