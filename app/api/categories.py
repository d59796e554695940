from fastapi import APIRouter, Depends
from app.schemas.category import CategoryWithEventsOut
from app.core.deps import get_store
from app.db.store import ScoreStore

router = APIRouter(prefix="/api/categories", tags=["Categories"])

@router.get("", response_model=list[CategoryWithEventsOut])
def list_categories_with_events(store: ScoreStore = Depends(get_store)):
    return store.get_categories_with_events()
