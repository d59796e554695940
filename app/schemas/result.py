from pydantic import StrictInt
from app.schemas.common import CamelModel
from app.schemas.standings import TeamStandingOut
from app.services.medals import Medal

class ResultOut(CamelModel):
    id: int
    team_id: int
    event_id: int
    medal: Medal
    points: int

class ResultUpdate(CamelModel):
    # Sin coerción: true o "1" no son ids válidos
    team_id: StrictInt
    event_id: StrictInt
    medal: Medal

class MedalHolderOut(CamelModel):
    team_id: int
    team_name: str
    team_color: str

class EventResultOut(CamelModel):
    event_id: int
    event_name: str
    gold: MedalHolderOut | None = None
    silver: MedalHolderOut | None = None
    bronze: MedalHolderOut | None = None
    results: list[ResultOut]

class ResultUpdateResponse(CamelModel):
    message: str
    result: ResultOut
    standings: list[TeamStandingOut]
    event_results: EventResultOut
