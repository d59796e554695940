from dataclasses import dataclass, field

from app.services.medals import Medal


@dataclass
class MedalHolder:
    team_id: int
    team_name: str
    team_color: str


@dataclass
class EventResult:
    event_id: int
    event_name: str
    gold: MedalHolder | None = None
    silver: MedalHolder | None = None
    bronze: MedalHolder | None = None
    results: list = field(default_factory=list)


def _holder(results, medal, teams_by_id):
    # Primer resultado con esa medalla
    match = next((r for r in results if r.medal == medal.value), None)
    if not match:
        return None
    team = teams_by_id.get(match.team_id)
    if not team:
        return None
    return MedalHolder(team_id=team.id, team_name=team.name, team_color=team.color)


def get_event_results(store, event_id: int) -> EventResult | None:
    """
    Podio de un evento + todos sus resultados.
    None si el evento no existe (distinto de "existe pero sin medallas").
    """
    with store.lock:
        event = store.get_event(event_id)
        if not event:
            return None

        results = store.get_results_by_event(event_id)
        teams_by_id = {t.id: t for t in store.get_teams()}

    return EventResult(
        event_id=event.id,
        event_name=event.name,
        gold=_holder(results, Medal.GOLD, teams_by_id),
        silver=_holder(results, Medal.SILVER, teams_by_id),
        bronze=_holder(results, Medal.BRONZE, teams_by_id),
        results=results,
    )
