from types import SimpleNamespace

import pytest

from app.core.errors import MedalConflictError, NotFoundError
from app.services.event_results import get_event_results
from app.services.medals import Medal, MEDAL_POINTS, points_for, is_podium
from app.services.scoring import record_medal
from app.services.standings import compute_team_standings, get_team_standings
from app.services.validation import MedalPolicy, check_medal_assignment


def _team(store, name):
    return store.get_team_by_name(name)


def _event(store, name):
    return next(e for e in store.get_events() if e.name == name)


def _assert_totals_match_results(store):
    for standing in get_team_standings(store):
        expected = sum(r.points for r in store.get_results_by_team(standing.team_id))
        assert standing.total_points == expected


# -----------------------
# Medallas
# -----------------------
def test_medal_points_are_ordered():
    assert points_for(Medal.GOLD) > points_for(Medal.SILVER) > points_for(Medal.BRONZE) > 0
    assert points_for(Medal.NON_WINNER) == 0
    assert points_for(Medal.NO_ENTRY) == 0
    assert Medal.NON_WINNER != Medal.NO_ENTRY
    assert set(MEDAL_POINTS) == set(Medal)


def test_podium_medals():
    assert is_podium("gold") and is_podium("silver") and is_podium("bronze")
    assert not is_podium("non_winner")
    assert not is_podium("no_entry")


def test_unknown_medal_is_rejected():
    with pytest.raises(ValueError):
        points_for("platinum")


# -----------------------
# Seeding
# -----------------------
def test_seed_creates_one_no_entry_per_team_and_event(seeded_store):
    teams = seeded_store.get_teams()
    events = seeded_store.get_events()
    results = seeded_store.get_results()

    assert len(teams) == 12
    assert len(events) == 20
    assert len(results) == len(teams) * len(events)

    pairs = {(r.team_id, r.event_id) for r in results}
    assert len(pairs) == len(results)
    assert all(r.medal == "no_entry" and r.points == 0 for r in results)


def test_standings_after_seed_are_all_zero(seeded_store):
    standings = get_team_standings(seeded_store)

    assert len(standings) == 12
    assert all(s.total_points == 0 for s in standings)
    assert all(s.gold_count == s.silver_count == s.bronze_count == 0 for s in standings)


def test_seed_is_idempotent(seeded_store, settings):
    from app.scripts.seed_data import initialize_data

    before = len(seeded_store.get_results())
    initialize_data(seeded_store, settings)

    assert len(seeded_store.get_results()) == before
    assert len(seeded_store.get_teams()) == 12
    assert seeded_store.get_user_by_username("admin") is not None


# -----------------------
# Clasificación
# -----------------------
def test_standings_sum_points_and_count_medals():
    teams = [
        SimpleNamespace(id=1, name="A", color="red"),
        SimpleNamespace(id=2, name="B", color="blue"),
    ]
    results = [
        SimpleNamespace(team_id=1, medal="gold", points=10),
        SimpleNamespace(team_id=1, medal="bronze", points=5),
        SimpleNamespace(team_id=2, medal="silver", points=7),
        SimpleNamespace(team_id=2, medal="gold", points=10),
        SimpleNamespace(team_id=2, medal="non_winner", points=0),
    ]

    standings = compute_team_standings(teams, results)

    assert [s.team_id for s in standings] == [2, 1]
    b, a = standings
    assert (b.total_points, b.gold_count, b.silver_count, b.bronze_count) == (17, 1, 1, 0)
    assert (a.total_points, a.gold_count, a.silver_count, a.bronze_count) == (15, 1, 0, 1)


def test_standings_ties_keep_team_order():
    teams = [SimpleNamespace(id=i, name=f"T{i}", color="x") for i in (1, 2, 3)]
    results = [
        SimpleNamespace(team_id=3, medal="silver", points=7),
        SimpleNamespace(team_id=1, medal="bronze", points=5),
        SimpleNamespace(team_id=2, medal="bronze", points=5),
    ]

    standings = compute_team_standings(teams, results)

    assert [s.team_id for s in standings] == [3, 1, 2]


def test_team_without_results_still_listed():
    teams = [SimpleNamespace(id=1, name="A", color="red")]

    standings = compute_team_standings(teams, [])

    assert standings[0].total_points == 0


# -----------------------
# Validación
# -----------------------
def test_strict_rejects_second_gold_naming_holder(small_store):
    bulls = _team(small_store, "Red Bulls")
    pythons = _team(small_store, "Green Pythons")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD)

    with pytest.raises(MedalConflictError) as exc:
        record_medal(small_store, pythons.id, hiphop.id, Medal.GOLD)

    assert exc.value.holder_id == bulls.id
    assert "Red Bulls" in exc.value.message
    assert exc.value.message == "GOLD medal is already assigned to Red Bulls for this event"
    # No se escribió nada
    assert small_store.get_result_by_team_and_event(pythons.id, hiphop.id).medal == "no_entry"


def test_strict_allows_same_team_to_keep_its_medal(small_store):
    bulls = _team(small_store, "Red Bulls")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD)
    update = record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD)

    assert update.result.medal == "gold"


def test_strict_allows_same_medal_in_other_event(small_store):
    bulls = _team(small_store, "Red Bulls")
    pythons = _team(small_store, "Green Pythons")

    record_medal(small_store, bulls.id, _event(small_store, "Hip-Hop").id, Medal.GOLD)
    update = record_medal(small_store, pythons.id, _event(small_store, "Contemporary Dance").id, Medal.GOLD)

    assert update.result.medal == "gold"


def test_non_podium_medals_skip_conflict_check(small_store):
    hiphop = _event(small_store, "Hip-Hop")
    teams = small_store.get_teams()

    for team in teams:
        check_medal_assignment(small_store, team.id, hiphop.id, Medal.NON_WINNER)
        record_medal(small_store, team.id, hiphop.id, Medal.NON_WINNER)

    assert all(r.medal == "non_winner" for r in small_store.get_results_by_event(hiphop.id))


def test_relaxed_allows_duplicate_gold(small_store):
    bulls = _team(small_store, "Red Bulls")
    pythons = _team(small_store, "Green Pythons")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD, policy=MedalPolicy.RELAXED)
    record_medal(small_store, pythons.id, hiphop.id, Medal.GOLD, policy=MedalPolicy.RELAXED)

    golds = [r for r in small_store.get_results_by_event(hiphop.id) if r.medal == "gold"]
    assert {r.team_id for r in golds} == {bulls.id, pythons.id}


def test_relaxed_appends_results(small_store):
    bulls = _team(small_store, "Red Bulls")
    hiphop = _event(small_store, "Hip-Hop")
    before = len(small_store.get_results())

    first = record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD, policy="relaxed")
    second = record_medal(small_store, bulls.id, hiphop.id, Medal.SILVER, policy="relaxed")

    assert first.created and second.created
    assert len(small_store.get_results()) == before + 2
    standing = next(s for s in second.standings if s.team_id == bulls.id)
    assert standing.total_points == 17
    _assert_totals_match_results(small_store)


# -----------------------
# Asignación de medallas
# -----------------------
def test_record_medal_updates_existing_result(small_store):
    bulls = _team(small_store, "Red Bulls")
    hiphop = _event(small_store, "Hip-Hop")
    seeded = small_store.get_result_by_team_and_event(bulls.id, hiphop.id)

    update = record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD)

    assert not update.created
    assert update.result.id == seeded.id
    assert update.result.points == 10
    assert update.event_results.gold.team_name == "Red Bulls"
    assert update.standings[0].team_id == bulls.id
    assert update.standings[0].total_points == 10


def test_record_medal_creates_result_when_missing(store):
    team = store.create_team("Red Bulls", "bull")
    category = store.create_category("DANCES", "pink")
    event = store.create_event("Hip-Hop", category.id)

    update = record_medal(store, team.id, event.id, Medal.BRONZE)

    assert update.created
    assert store.get_result_by_team_and_event(team.id, event.id).points == 5


def test_gold_to_silver_moves_points_and_counts(small_store):
    bulls = _team(small_store, "Red Bulls")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD)
    update = record_medal(small_store, bulls.id, hiphop.id, Medal.SILVER)

    standing = next(s for s in update.standings if s.team_id == bulls.id)
    assert update.result.points == 7
    assert standing.total_points == 7
    assert standing.gold_count == 0
    assert standing.silver_count == 1
    _assert_totals_match_results(small_store)


def test_freed_medal_can_be_reassigned(small_store):
    bulls = _team(small_store, "Red Bulls")
    pythons = _team(small_store, "Green Pythons")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD)
    record_medal(small_store, bulls.id, hiphop.id, Medal.NON_WINNER)
    update = record_medal(small_store, pythons.id, hiphop.id, Medal.GOLD)

    assert update.event_results.gold.team_id == pythons.id


def test_record_medal_unknown_event_or_team(small_store):
    bulls = _team(small_store, "Red Bulls")
    hiphop = _event(small_store, "Hip-Hop")

    with pytest.raises(NotFoundError) as exc:
        record_medal(small_store, bulls.id, 999, Medal.GOLD)
    assert exc.value.message == "Event with id '999' not found"

    with pytest.raises(NotFoundError) as exc:
        record_medal(small_store, 999, hiphop.id, Medal.GOLD)
    assert exc.value.message == "Team with id '999' not found"


def test_totals_match_results_after_many_updates(small_store):
    teams = small_store.get_teams()
    events = small_store.get_events()
    medals = [Medal.GOLD, Medal.SILVER, Medal.BRONZE]

    for event in events:
        for team, medal in zip(teams, medals):
            record_medal(small_store, team.id, event.id, medal)
            _assert_totals_match_results(small_store)

    standings = get_team_standings(small_store)
    assert [s.total_points for s in standings] == [20, 14, 10]


# -----------------------
# Resultados por evento
# -----------------------
def test_event_results_unknown_event_is_none(small_store):
    assert get_event_results(small_store, 999) is None


def test_event_results_without_medals(small_store):
    hiphop = _event(small_store, "Hip-Hop")

    data = get_event_results(small_store, hiphop.id)

    assert data.event_name == "Hip-Hop"
    assert data.gold is None and data.silver is None and data.bronze is None
    assert len(data.results) == 3


def test_event_results_podium(small_store):
    bulls = _team(small_store, "Red Bulls")
    pythons = _team(small_store, "Green Pythons")
    tigers = _team(small_store, "Maroon Tigers")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, tigers.id, hiphop.id, Medal.GOLD)
    record_medal(small_store, bulls.id, hiphop.id, Medal.SILVER)
    record_medal(small_store, pythons.id, hiphop.id, Medal.BRONZE)

    data = get_event_results(small_store, hiphop.id)

    assert (data.gold.team_id, data.gold.team_name, data.gold.team_color) == (tigers.id, "Maroon Tigers", "tiger")
    assert data.silver.team_id == bulls.id
    assert data.bronze.team_id == pythons.id


def test_event_results_first_gold_wins_under_relaxed(small_store):
    bulls = _team(small_store, "Red Bulls")
    pythons = _team(small_store, "Green Pythons")
    hiphop = _event(small_store, "Hip-Hop")

    record_medal(small_store, pythons.id, hiphop.id, Medal.GOLD, policy=MedalPolicy.RELAXED)
    record_medal(small_store, bulls.id, hiphop.id, Medal.GOLD, policy=MedalPolicy.RELAXED)

    assert get_event_results(small_store, hiphop.id).gold.team_id == pythons.id


def test_concurrent_gold_assignments_award_one_team(small_store):
    from concurrent.futures import ThreadPoolExecutor

    hiphop = _event(small_store, "Hip-Hop")
    teams = small_store.get_teams()

    def assign(team):
        try:
            record_medal(small_store, team.id, hiphop.id, Medal.GOLD)
            return True
        except MedalConflictError:
            return False

    with ThreadPoolExecutor(max_workers=len(teams)) as pool:
        outcomes = list(pool.map(assign, teams))

    assert outcomes.count(True) == 1
    golds = [r for r in small_store.get_results_by_event(hiphop.id) if r.medal == "gold"]
    assert len(golds) == 1
