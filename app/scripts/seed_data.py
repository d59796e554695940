import logging
from app.core.security import hash_password
from app.services.medals import Medal, points_for

logger = logging.getLogger(__name__)

TEAMS = [
    {"name": "Royal Blue Dragons", "color": "royal"},
    {"name": "Ninja Turquoise", "color": "turquoise"},
    {"name": "Green Pythons", "color": "python"},
    {"name": "Yellow Hornets", "color": "hornet"},
    {"name": "Orange Jaguars", "color": "jaguar"},
    {"name": "Red Bulls", "color": "bull"},
    {"name": "Purple Wasps", "color": "wasp"},
    {"name": "Pink Panthers", "color": "panther"},
    {"name": "White Falcons", "color": "falcon"},
    {"name": "Gray Stallions", "color": "stallion"},
    {"name": "Brown Wolves", "color": "wolf"},
    {"name": "Maroon Tigers", "color": "tiger"},
]

CATEGORIES = [
    {"name": "VISUAL ARTS", "color": "indigo"},
    {"name": "QUIZ BOWL", "color": "blue"},
    {"name": "MUSICAL", "color": "purple"},
    {"name": "DANCES", "color": "pink"},
    {"name": "LITERARY", "color": "amber"},
]

EVENTS = {
    "VISUAL ARTS": [
        "On-the-Spot Poster Making",
        "Pencil Drawing",
        "In Situ Painting",
        "Charcoal Rendering",
        "Photo Contest",
    ],
    "QUIZ BOWL": ["Quiz Bowl"],
    "MUSICAL": [
        "Instrumental Solo (Classical Guitar)",
        "Live Band",
        "Vocal Solo (Kundiman)",
        "Vocal Duet",
        "Pop Solo",
    ],
    "DANCES": ["Contemporary Dance", "Hip-Hop"],
    "LITERARY": [
        "Pagsusulat ng Sanaysay",
        "Essay Writing",
        "Pagkukwento",
        "Storytelling",
        "Dagliang Talumpati",
        "Extemporaneous Speaking",
        "Radio Drama",
    ],
}


def initialize_data(store, settings, teams=TEAMS, categories=CATEGORIES, events=EVENTS):
    """
    Carga los datos del festival. Se puede llamar varias veces: todo lo que
    ya existe (por nombre) se salta.

    Al final cada pareja equipo x evento tiene un resultado no_entry con 0
    puntos.
    """
    with store.lock:
        # 1. Admin
        if not store.get_user_by_username(settings.admin_username):
            store.create_user(settings.admin_username, hash_password(settings.admin_password))
            logger.info(f"Admin user '{settings.admin_username}' created")

        # 2. Equipos
        for team in teams:
            if not store.get_team_by_name(team["name"]):
                store.create_team(team["name"], team["color"])

        # 3. Categorías y sus eventos
        for category in categories:
            existing = store.get_category_by_name(category["name"])
            if not existing:
                existing = store.create_category(category["name"], category["color"])

            for event_name in events.get(category["name"], []):
                if not store.get_event_by_name(event_name, existing.id):
                    store.create_event(event_name, existing.id)

        # 4. Un "no_entry" por equipo y evento
        created = 0
        for team in store.get_teams():
            for event in store.get_events():
                if not store.get_result_by_team_and_event(team.id, event.id):
                    store.create_result(team.id, event.id, Medal.NO_ENTRY, points_for(Medal.NO_ENTRY))
                    created += 1

    logger.info(
        f"Seed complete: {len(store.get_teams())} teams, {len(store.get_events())} events, "
        f"{created} new results"
    )


if __name__ == "__main__":
    # Comprobación rápida del seed sobre un store vacío
    from app.core.config import Settings
    from app.db.store import ScoreStore

    logging.basicConfig(level=logging.INFO)
    store = ScoreStore()
    initialize_data(store, Settings())
    print(f"✅ {len(store.get_results())} resultados creados")
    store.close()
