"""Quick phrase endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from clinical_narrative.api.dependencies import get_phrase_store
from clinical_narrative.storage import FAVORITE_PHRASES, PhraseStore

router = APIRouter(prefix="/phrases", tags=["phrases"])


class PhraseRequest(BaseModel):
    phrase: str = Field(min_length=1)


@router.get("")
async def list_phrases(store: PhraseStore = Depends(get_phrase_store)) -> dict:
    """Favorite phrases and the recently used ones."""
    return {
        "favorites": [phrase._asdict() for phrase in FAVORITE_PHRASES],
        "recent": store.recent(),
    }


@router.post("/recent")
async def record_phrase(request: PhraseRequest, store: PhraseStore = Depends(get_phrase_store)) -> dict:
    """Mark a phrase as just used."""
    return {"recent": store.record(request.phrase)}
