"""Shared fixtures."""

import pytest

from fasttag.core.lexicon import Lexicon
from fasttag.core.tagger import Tagger


SAMPLE_LEXICON = """the DT
a DT
runs VBD
dog NN NNS
would MD
quick JJ
walk VB NN
3.14 NN
100 NN
"""


class InMemoryRedis:
    """Just the redis commands LexiconStore uses, kept in dicts."""

    def __init__(self):
        self.values: dict[str, bytes] = {}
        self.sets: dict[str, set[bytes]] = {}

    def set(self, key, value):
        self.values[key] = value.encode() if isinstance(value, str) else value

    def get(self, key):
        return self.values.get(key)

    def exists(self, key):
        return int(key in self.values or key in self.sets)

    def delete(self, key):
        self.values.pop(key, None)
        self.sets.pop(key, None)

    def sadd(self, key, member):
        self.sets.setdefault(key, set()).add(member.encode())

    def srem(self, key, member):
        self.sets.get(key, set()).discard(member.encode())

    def smembers(self, key):
        return set(self.sets.get(key, set()))


@pytest.fixture
def redis_client():
    return InMemoryRedis()


@pytest.fixture
def lexicon():
    return Lexicon(SAMPLE_LEXICON)


@pytest.fixture
def tagger(lexicon):
    return Tagger(lexicon)


@pytest.fixture
def empty_tagger():
    return Tagger(Lexicon(""))
