from enum import Enum

from app.core.errors import MedalConflictError
from app.services.medals import Medal, is_podium


class MedalPolicy(str, Enum):
    # strict: un oro/plata/bronce por evento y un resultado por equipo+evento
    STRICT = "strict"
    # relaxed: cada asignación crea un resultado nuevo, sin exclusividad
    RELAXED = "relaxed"


def find_medal_holder(event_results, medal, team_id: int):
    """
    Devuelve el primer resultado del evento con esa medalla que pertenezca
    a OTRO equipo, o None.
    """
    medal = Medal(medal).value
    for r in event_results:
        if r.medal == medal and r.team_id != team_id:
            return r
    return None


def check_medal_assignment(store, team_id: int, event_id: int, medal, policy=MedalPolicy.STRICT):
    """
    Lanza MedalConflictError si la medalla de podio ya pertenece a otro
    equipo en el evento. non_winner y no_entry siempre se permiten.
    """
    if MedalPolicy(policy) == MedalPolicy.RELAXED or not is_podium(medal):
        return

    holder = find_medal_holder(store.get_results_by_event(event_id), medal, team_id)
    if holder:
        team = store.get_team(holder.team_id)
        holder_name = team.name if team else f"team {holder.team_id}"
        raise MedalConflictError(Medal(medal).value, holder.team_id, holder_name)
