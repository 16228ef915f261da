# src/fasttag/core/store.py
"""
Lexicon storage in Redis.

Stores the raw lexicon text under a name, so a server can build
taggers for lexicons uploaded at runtime.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import redis

from fasttag import config
from fasttag.core.lexicon import Lexicon


log = logging.getLogger(__name__)


@dataclass
class LexiconInfo:
    name: str
    created_at: str
    word_count: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "created_at": self.created_at,
            "word_count": self.word_count,
        }


def get_redis() -> redis.Redis:
    return redis.Redis(host=config.REDIS_HOST, port=config.REDIS_PORT, db=config.REDIS_DB)


class LexiconStore:
    def __init__(self, client: redis.Redis, prefix: str = "fasttag"):
        self.client = client
        self.prefix = prefix

    def _lexicon_key(self, name: str) -> str:
        return f"{self.prefix}:lexicon:{name}"

    def _index_key(self) -> str:
        return f"{self.prefix}:lexicons"

    def save(self, name: str, text: str) -> LexiconInfo:
        """Store lexicon text under a name, replacing any previous version."""
        lexicon = Lexicon(text)
        info = LexiconInfo(
            name=name,
            created_at=datetime.now(timezone.utc).isoformat(),
            word_count=len(lexicon),
        )

        record = {**info.to_dict(), "text": text}
        self.client.set(self._lexicon_key(name), json.dumps(record))
        self.client.sadd(self._index_key(), name)

        log.info("stored lexicon %r (%d words)", name, info.word_count)
        return info

    def _get_record(self, name: str) -> dict | None:
        data = self.client.get(self._lexicon_key(name))
        if data is None:
            return None
        return json.loads(data)

    def get_info(self, name: str) -> LexiconInfo | None:
        record = self._get_record(name)
        if record is None:
            return None
        return LexiconInfo(record["name"], record["created_at"], record["word_count"])

    def get_text(self, name: str) -> str | None:
        record = self._get_record(name)
        if record is None:
            return None
        return record["text"]

    def load(self, name: str) -> Lexicon | None:
        text = self.get_text(name)
        if text is None:
            return None
        return Lexicon(text)

    def list_all(self) -> list[LexiconInfo]:
        infos = []
        for raw in self.client.smembers(self._index_key()):
            name = raw.decode() if isinstance(raw, bytes) else raw
            info = self.get_info(name)
            if info:
                infos.append(info)
        return sorted(infos, key=lambda i: i.name)

    def delete(self, name: str) -> bool:
        if not self.client.exists(self._lexicon_key(name)):
            return False
        self.client.delete(self._lexicon_key(name))
        self.client.srem(self._index_key(), name)
        log.info("deleted lexicon %r", name)
        return True
