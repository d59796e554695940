from fastapi import APIRouter, Depends
from app.schemas.standings import TeamStandingOut
from app.core.deps import get_store
from app.db.store import ScoreStore
from app.services.standings import get_team_standings

router = APIRouter(prefix="/api/standings", tags=["Standings"])

@router.get("", response_model=list[TeamStandingOut])
def team_standings(store: ScoreStore = Depends(get_store)):
    return [TeamStandingOut.model_validate(s) for s in get_team_standings(store)]
