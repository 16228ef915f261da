"""
Tagging routes: /api/tag
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from fasttag import config
from fasttag.core.store import LexiconStore
from fasttag.server.deps import TaggerCache, get_lexicon_store, get_tagger_cache


router = APIRouter(prefix="/api/tag", tags=["tag"])


class TagRequest(BaseModel):
    text: str | None = None
    tokens: list[str] | None = None
    lexicon: str = config.DEFAULT_LEXICON_NAME


@router.post("")
async def tag(
    req: TagRequest,
    store: LexiconStore = Depends(get_lexicon_store),
    cache: TaggerCache = Depends(get_tagger_cache),
):
    """Tag a sentence (split on spaces) or a pre-split token list."""
    if req.text is None and req.tokens is None:
        raise HTTPException(status_code=400, detail="Provide 'text' or 'tokens'")

    tagger = cache.get(store, req.lexicon)
    if tagger is None:
        raise HTTPException(status_code=404, detail=f"Lexicon not found: {req.lexicon}")

    if req.tokens is not None:
        result = tagger.tag(req.tokens)
    else:
        result = tagger.tag_sentence(req.text)

    return {
        "lexicon": req.lexicon,
        "tokens": [t.to_dict() for t in result],
    }
