"""
Lexicon routes: /api/lexicons
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from fasttag import config
from fasttag.core.store import LexiconStore
from fasttag.server.deps import TaggerCache, get_default_info, get_lexicon_store, get_tagger_cache


RESERVED_CHARS = set("/?#%")


router = APIRouter(prefix="/api/lexicons", tags=["lexicons"])


class CreateLexiconRequest(BaseModel):
    name: str
    text: str


@router.get("")
async def list_lexicons(store: LexiconStore = Depends(get_lexicon_store)):
    """List stored lexicons."""
    return {"lexicons": [info.to_dict() for info in store.list_all()]}


@router.post("")
async def create_lexicon(
    req: CreateLexiconRequest,
    store: LexiconStore = Depends(get_lexicon_store),
    cache: TaggerCache = Depends(get_tagger_cache),
):
    """Store a lexicon from its text. Replaces an existing one with the same name."""
    if req.name == config.DEFAULT_LEXICON_NAME:
        raise HTTPException(status_code=400, detail=f"'{req.name}' is reserved")
    if not req.name:
        raise HTTPException(status_code=400, detail="Lexicon name is required")
    if RESERVED_CHARS & set(req.name):
        raise HTTPException(status_code=400, detail="Lexicon name may not contain / ? # %")

    info = store.save(req.name, req.text)
    cache.invalidate(req.name)
    return info.to_dict()


@router.get("/{name}")
async def get_lexicon(name: str, store: LexiconStore = Depends(get_lexicon_store)):
    if name == config.DEFAULT_LEXICON_NAME:
        return get_default_info().to_dict()

    info = store.get_info(name)
    if not info:
        raise HTTPException(status_code=404, detail="Lexicon not found")
    return info.to_dict()


@router.delete("/{name}")
async def delete_lexicon(
    name: str,
    store: LexiconStore = Depends(get_lexicon_store),
    cache: TaggerCache = Depends(get_tagger_cache),
):
    if name == config.DEFAULT_LEXICON_NAME:
        raise HTTPException(status_code=400, detail=f"'{name}' is reserved")
    if not store.delete(name):
        raise HTTPException(status_code=404, detail="Lexicon not found")
    cache.invalidate(name)
    return {"deleted": name}


@router.get("/{name}/words/{word}")
async def check_word(
    name: str,
    word: str,
    store: LexiconStore = Depends(get_lexicon_store),
    cache: TaggerCache = Depends(get_tagger_cache),
):
    """Is a word in the lexicon (exact case or lowercased)?"""
    tagger = cache.get(store, name)
    if tagger is None:
        raise HTTPException(status_code=404, detail="Lexicon not found")

    lexicon = tagger.lexicon
    tags = lexicon.tags(word)
    return {
        "lexicon": name,
        "word": word,
        "in_lexicon": lexicon.contains(word),
        "tags": list(tags) if tags is not None else [],
    }
