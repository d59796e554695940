from dataclasses import dataclass

from app.services.medals import Medal


@dataclass
class TeamStanding:
    team_id: int
    team_name: str
    team_color: str
    total_points: int = 0
    gold_count: int = 0
    silver_count: int = 0
    bronze_count: int = 0


def compute_team_standings(teams, results) -> list[TeamStanding]:
    """
    Suma los puntos y cuenta medallas de cada equipo a partir de todos los
    resultados. Se recalcula siempre desde cero: no se guarda ningún total.

    Orden: puntos descendentes. sorted() es estable, así que los empates
    mantienen el orden de los equipos (por id).
    """
    by_team = {
        t.id: TeamStanding(team_id=t.id, team_name=t.name, team_color=t.color)
        for t in teams
    }

    for r in results:
        standing = by_team.get(r.team_id)
        if standing is None:
            continue
        standing.total_points += r.points
        if r.medal == Medal.GOLD.value:
            standing.gold_count += 1
        elif r.medal == Medal.SILVER.value:
            standing.silver_count += 1
        elif r.medal == Medal.BRONZE.value:
            standing.bronze_count += 1

    return sorted(by_team.values(), key=lambda s: s.total_points, reverse=True)


def get_team_standings(store) -> list[TeamStanding]:
    with store.lock:
        return compute_team_standings(store.get_teams(), store.get_results())
