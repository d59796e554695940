import logging
from fastapi import APIRouter, Depends
from app.schemas.team import TeamOut, TeamIconUpdate
from app.core.deps import get_store, get_current_user
from app.core.errors import NotFoundError, ErrorCode
from app.db.store import ScoreStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["Teams"])

@router.get("", response_model=list[TeamOut])
def list_teams(store: ScoreStore = Depends(get_store)):
    return store.get_teams()

@router.post("/{team_id}/icon", response_model=TeamOut)
def update_team_icon(
    team_id: int,
    payload: TeamIconUpdate,
    store: ScoreStore = Depends(get_store),
    current_user = Depends(get_current_user)
):
    """
    Cambia el icono de un equipo. Es lo único que se puede editar de un
    equipo después del seeding.
    """
    team = store.update_team_icon(team_id, payload.icon)
    if not team:
        raise NotFoundError("Team", team_id, code=ErrorCode.TEAM_NOT_FOUND)

    logger.info(f"'{current_user.username}' changed icon of '{team.name}'")
    return team
