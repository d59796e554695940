import logging
from dataclasses import dataclass

from app.core.errors import NotFoundError, MedalConflictError, ErrorCode
from app.services.medals import Medal, points_for
from app.services.validation import MedalPolicy, check_medal_assignment
from app.services.standings import TeamStanding, get_team_standings
from app.services.event_results import EventResult, get_event_results

logger = logging.getLogger(__name__)


@dataclass
class ScoreUpdate:
    result: object
    standings: list[TeamStanding]
    event_results: EventResult
    created: bool


def record_medal(store, team_id: int, event_id: int, medal, policy=MedalPolicy.STRICT) -> ScoreUpdate:
    """
    Asigna una medalla a un equipo en un evento y devuelve las vistas
    recalculadas.

    - strict: actualiza el resultado existente del equipo en el evento
      (o lo crea si no hay ninguno) tras validar la exclusividad del podio.
    - relaxed: siempre crea un resultado nuevo, sin validar.

    Validación y escritura se hacen con el lock del store tomado.
    """
    medal = Medal(medal)
    policy = MedalPolicy(policy)
    points = points_for(medal)

    with store.lock:
        event = store.get_event(event_id)
        if not event:
            raise NotFoundError("Event", event_id, code=ErrorCode.EVENT_NOT_FOUND)

        team = store.get_team(team_id)
        if not team:
            raise NotFoundError("Team", team_id, code=ErrorCode.TEAM_NOT_FOUND)

        try:
            check_medal_assignment(store, team_id, event_id, medal, policy)
        except MedalConflictError as e:
            logger.info(f"Rejected {medal.value} for '{team.name}' in '{event.name}': {e}")
            raise

        existing = None
        if policy == MedalPolicy.STRICT:
            existing = store.get_result_by_team_and_event(team_id, event_id)

        if existing:
            result = store.update_result(existing.id, medal, points)
            if not result:
                raise NotFoundError("Result", existing.id, code=ErrorCode.RESULT_NOT_FOUND)
        else:
            result = store.create_result(team_id, event_id, medal, points)

        logger.info(
            f"{'Created' if not existing else 'Updated'} result {result.id}: "
            f"'{team.name}' -> {medal.value} ({points} pts) in '{event.name}'"
        )

        return ScoreUpdate(
            result=result,
            standings=get_team_standings(store),
            event_results=get_event_results(store, event_id),
            created=existing is None,
        )
