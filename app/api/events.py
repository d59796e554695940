from fastapi import APIRouter, Depends
from app.schemas.category import EventOut
from app.schemas.result import EventResultOut
from app.core.deps import get_store
from app.core.errors import NotFoundError, ErrorCode
from app.db.store import ScoreStore
from app.services.event_results import get_event_results

router = APIRouter(prefix="/api/events", tags=["Events"])

@router.get("", response_model=list[EventOut])
def list_events(store: ScoreStore = Depends(get_store)):
    return store.get_events()

@router.get("/{event_id}/results", response_model=EventResultOut)
def event_results(event_id: int, store: ScoreStore = Depends(get_store)):
    """Podio (oro, plata, bronce) y resultados de todos los equipos"""
    data = get_event_results(store, event_id)
    if data is None:
        raise NotFoundError("Event", event_id, code=ErrorCode.EVENT_NOT_FOUND)

    return EventResultOut.model_validate(data)
