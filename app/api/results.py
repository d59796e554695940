from fastapi import APIRouter, Depends
from app.schemas.result import ResultUpdate, ResultUpdateResponse
from app.core.config import Settings
from app.core.deps import get_store, get_settings, get_current_user
from app.db.store import ScoreStore
from app.services.scoring import record_medal

router = APIRouter(prefix="/api/results", tags=["Results"])

@router.post("/update", response_model=ResultUpdateResponse)
def update_result(
    payload: ResultUpdate,
    store: ScoreStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    current_user = Depends(get_current_user)
):
    """
    Asigna una medalla a un equipo en un evento.
    Devuelve el resultado y la clasificación y el podio ya recalculados.
    """
    update = record_medal(
        store,
        payload.team_id,
        payload.event_id,
        payload.medal,
        policy=settings.medal_policy
    )

    return ResultUpdateResponse.model_validate({
        "message": "Result created successfully" if update.created else "Result updated successfully",
        "result": update.result,
        "standings": update.standings,
        "event_results": update.event_results,
    })
