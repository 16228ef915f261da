"""
HTTP client for the FastTag API.
"""

from urllib.parse import quote

import httpx

from fasttag.config import BASE_URL


# === Tagging ===

def tag_text(text: str, lexicon: str = "default") -> list[dict]:
    r = httpx.post(f"{BASE_URL}/tag", json={"text": text, "lexicon": lexicon}, timeout=30)
    r.raise_for_status()
    return r.json()["tokens"]


# === Lexicons ===

def create_lexicon(name: str, text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/lexicons", json={"name": name, "text": text}, timeout=60)
    r.raise_for_status()
    return r.json()


def list_lexicons() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/lexicons")
    r.raise_for_status()
    return r.json()["lexicons"]


def get_lexicon(name: str) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicons/{quote(name, safe='')}")
    r.raise_for_status()
    return r.json()


def delete_lexicon(name: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/lexicons/{quote(name, safe='')}")
    r.raise_for_status()
    return r.json()


def check_word(name: str, word: str) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicons/{quote(name, safe='')}/words/{quote(word, safe='')}")
    r.raise_for_status()
    return r.json()
