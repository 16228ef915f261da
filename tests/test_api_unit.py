"""
Unit tests using FastAPI TestClient (no separate server needed).
"""

import pytest
from fastapi.testclient import TestClient

from fasttag.core.loader import load_default_lexicon
from fasttag.core.store import LexiconStore
from fasttag.server import deps
from fasttag.server.main import app


@pytest.fixture
def client(redis_client):
    store = LexiconStore(redis_client, prefix="testlex")
    cache = deps.TaggerCache()

    app.dependency_overrides[deps.get_lexicon_store] = lambda: store
    app.dependency_overrides[deps.get_tagger_cache] = lambda: cache
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "FastTag API"


class TestTagUnit:
    def test_tag_text(self, client):
        r = client.post("/api/tag", json={"text": "the dog"})
        assert r.status_code == 200
        assert r.json() == {
            "lexicon": "default",
            "tokens": [
                {"word": "the", "tag": "DT"},
                {"word": "dog", "tag": "NN"},
            ],
        }

    def test_tag_tokens(self, client):
        r = client.post("/api/tag", json={"tokens": ["The", "dog,", "--"]})
        assert r.status_code == 200
        tokens = r.json()["tokens"]
        assert [(t["word"], t["tag"]) for t in tokens] == [("The", "DT"), ("dog,", "NN"), ("--", "")]

    def test_tag_empty_text(self, client):
        r = client.post("/api/tag", json={"text": ""})
        assert r.status_code == 200
        assert r.json()["tokens"] == []

    def test_tag_needs_input(self, client):
        r = client.post("/api/tag", json={})
        assert r.status_code == 400

    def test_tag_unknown_lexicon(self, client):
        r = client.post("/api/tag", json={"text": "the dog", "lexicon": "nope"})
        assert r.status_code == 404


class TestLexiconUnit:
    def test_create_and_tag(self, client):
        r = client.post("/api/lexicons", json={"name": "mini", "text": "the DT\nruns VBD"})
        assert r.status_code == 200
        assert r.json()["word_count"] == 2

        r = client.post("/api/tag", json={"text": "the runs", "lexicon": "mini"})
        tokens = r.json()["tokens"]
        assert tokens[1] == {"word": "runs", "tag": "NNS"}

    def test_replace_refreshes_tagger(self, client):
        client.post("/api/lexicons", json={"name": "mini", "text": "zorp VB"})
        r = client.post("/api/tag", json={"text": "zorp", "lexicon": "mini"})
        assert r.json()["tokens"][0]["tag"] == "VB"

        client.post("/api/lexicons", json={"name": "mini", "text": "zorp JJ"})
        r = client.post("/api/tag", json={"text": "zorp", "lexicon": "mini"})
        assert r.json()["tokens"][0]["tag"] == "JJ"

    def test_reserved_name(self, client):
        r = client.post("/api/lexicons", json={"name": "default", "text": "a DT"})
        assert r.status_code == 400

    def test_name_with_url_characters_rejected(self, client):
        for name in ["a/b", "a?b", "a#b", ""]:
            r = client.post("/api/lexicons", json={"name": name, "text": "a DT"})
            assert r.status_code == 400

        assert client.get("/api/lexicons").json()["lexicons"] == []

    def test_get_default(self, client):
        r = client.get("/api/lexicons/default")
        assert r.status_code == 200
        assert r.json()["name"] == "default"
        assert r.json()["word_count"] == len(load_default_lexicon())

    def test_delete_default_reserved(self, client):
        r = client.delete("/api/lexicons/default")
        assert r.status_code == 400

        r = client.post("/api/tag", json={"text": "the dog"})
        assert r.status_code == 200

    def test_list_and_get(self, client):
        client.post("/api/lexicons", json={"name": "mini", "text": "a DT"})

        r = client.get("/api/lexicons")
        assert [lex["name"] for lex in r.json()["lexicons"]] == ["mini"]

        r = client.get("/api/lexicons/mini")
        assert r.status_code == 200
        assert r.json()["word_count"] == 1

        r = client.get("/api/lexicons/nope")
        assert r.status_code == 404

    def test_delete(self, client):
        client.post("/api/lexicons", json={"name": "mini", "text": "a DT"})

        r = client.delete("/api/lexicons/mini")
        assert r.status_code == 200
        assert r.json() == {"deleted": "mini"}

        r = client.post("/api/tag", json={"text": "a", "lexicon": "mini"})
        assert r.status_code == 404

        r = client.delete("/api/lexicons/mini")
        assert r.status_code == 404

    def test_check_word(self, client):
        client.post("/api/lexicons", json={"name": "mini", "text": "the DT"})

        r = client.get("/api/lexicons/mini/words/The")
        assert r.json() == {"lexicon": "mini", "word": "The", "in_lexicon": True, "tags": ["DT"]}

        r = client.get("/api/lexicons/mini/words/dog")
        assert r.json()["in_lexicon"] is False
        assert r.json()["tags"] == []

    def test_check_word_default(self, client):
        r = client.get("/api/lexicons/default/words/dog")
        assert r.status_code == 200
        assert r.json()["in_lexicon"] is True
