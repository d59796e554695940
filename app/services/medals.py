from enum import Enum


class Medal(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    NON_WINNER = "non_winner"  # participó pero no ganó
    NO_ENTRY = "no_entry"      # no participó


MEDAL_POINTS = {
    Medal.GOLD: 10,
    Medal.SILVER: 7,
    Medal.BRONZE: 5,
    Medal.NON_WINNER: 0,
    Medal.NO_ENTRY: 0,
}

PODIUM_MEDALS = (Medal.GOLD, Medal.SILVER, Medal.BRONZE)


def points_for(medal) -> int:
    """Puntos fijos que otorga una medalla."""
    return MEDAL_POINTS[Medal(medal)]


def is_podium(medal) -> bool:
    return Medal(medal) in PODIUM_MEDALS
