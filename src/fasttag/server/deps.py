"""
Shared dependencies for routes.
"""

from datetime import datetime, timezone
from functools import lru_cache

from fasttag import config
from fasttag.core.loader import load_default_lexicon
from fasttag.core.store import LexiconInfo, LexiconStore, get_redis
from fasttag.core.tagger import Tagger


def get_lexicon_store() -> LexiconStore:
    return LexiconStore(get_redis())


@lru_cache(maxsize=1)
def get_default_tagger() -> Tagger:
    return Tagger(load_default_lexicon())


def get_default_info() -> LexiconInfo:
    """Info for the configured file lexicon; created_at is the file's mtime."""
    mtime = config.LEXICON_PATH.stat().st_mtime
    return LexiconInfo(
        name=config.DEFAULT_LEXICON_NAME,
        created_at=datetime.fromtimestamp(mtime, timezone.utc).isoformat(),
        word_count=len(get_default_tagger().lexicon),
    )


class TaggerCache:
    """Taggers for stored lexicons, keyed by name."""

    def __init__(self):
        self.taggers: dict[str, Tagger] = {}

    def get(self, store: LexiconStore, name: str) -> Tagger | None:
        if name == config.DEFAULT_LEXICON_NAME:
            return get_default_tagger()

        if name not in self.taggers:
            lexicon = store.load(name)
            if lexicon is None:
                return None
            self.taggers[name] = Tagger(lexicon)
        return self.taggers[name]

    def invalidate(self, name: str) -> None:
        self.taggers.pop(name, None)


tagger_cache = TaggerCache()


def get_tagger_cache() -> TaggerCache:
    return tagger_cache
