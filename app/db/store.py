"""
Almacén en memoria del marcador.

Cada ScoreStore tiene su propia base de datos SQLite en memoria, así que dos
instancias nunca comparten datos (útil en los tests). Las búsquedas devuelven
None cuando no existe la entidad; traducir eso a un 404 es cosa de la API.
"""
import threading
from contextlib import contextmanager

from app.db.session import Base, make_memory_engine, make_session_factory
from app.db.models._all import Team, Category, Event, Result, User
from app.services.medals import Medal

# Rango de INTEGER en SQLite; fuera de él el driver lanza OverflowError
MIN_ID = -2**63
MAX_ID = 2**63 - 1


def _valid_id(*ids) -> bool:
    return all(isinstance(i, int) and MIN_ID <= i <= MAX_ID for i in ids)


class ScoreStore:

    def __init__(self, echo: bool = False):
        self.engine = make_memory_engine(echo=echo)
        self.SessionLocal = make_session_factory(self.engine)
        # FastAPI ejecuta los endpoints síncronos en un threadpool: todo acceso
        # pasa por este lock. Es reentrante para que scoring pueda mantenerlo
        # durante validar + escribir.
        self.lock = threading.RLock()
        Base.metadata.create_all(bind=self.engine)

    def close(self):
        self.engine.dispose()

    @contextmanager
    def _session(self):
        with self.lock:
            db = self.SessionLocal()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def _add(self, obj):
        with self._session() as db:
            db.add(obj)
            db.flush()
            db.refresh(obj)
        return obj

    # -----------------------
    # Usuarios
    # -----------------------
    def get_user(self, user_id: int) -> User | None:
        if not _valid_id(user_id):
            return None
        with self._session() as db:
            return db.get(User, user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._session() as db:
            return db.query(User).filter(User.username == username).first()

    def create_user(self, username: str, hashed_password: str) -> User:
        return self._add(User(username=username, hashed_password=hashed_password))

    # -----------------------
    # Equipos
    # -----------------------
    def get_teams(self) -> list[Team]:
        with self._session() as db:
            return db.query(Team).order_by(Team.id).all()

    def get_team(self, team_id: int) -> Team | None:
        if not _valid_id(team_id):
            return None
        with self._session() as db:
            return db.get(Team, team_id)

    def get_team_by_name(self, name: str) -> Team | None:
        with self._session() as db:
            return db.query(Team).filter(Team.name == name).first()

    def create_team(self, name: str, color: str, icon: str | None = None) -> Team:
        return self._add(Team(name=name, color=color, icon=icon))

    def update_team_icon(self, team_id: int, icon: str) -> Team | None:
        if not _valid_id(team_id):
            return None
        with self._session() as db:
            team = db.get(Team, team_id)
            if not team:
                return None
            team.icon = icon
            db.flush()
            return team

    # -----------------------
    # Categorías
    # -----------------------
    def get_categories(self) -> list[Category]:
        with self._session() as db:
            return db.query(Category).order_by(Category.id).all()

    def get_category(self, category_id: int) -> Category | None:
        if not _valid_id(category_id):
            return None
        with self._session() as db:
            return db.get(Category, category_id)

    def get_category_by_name(self, name: str) -> Category | None:
        with self._session() as db:
            return db.query(Category).filter(Category.name == name).first()

    def create_category(self, name: str, color: str) -> Category:
        return self._add(Category(name=name, color=color))

    # -----------------------
    # Eventos
    # -----------------------
    def get_events(self) -> list[Event]:
        with self._session() as db:
            return db.query(Event).order_by(Event.id).all()

    def get_event(self, event_id: int) -> Event | None:
        if not _valid_id(event_id):
            return None
        with self._session() as db:
            return db.get(Event, event_id)

    def get_event_by_name(self, name: str, category_id: int) -> Event | None:
        if not _valid_id(category_id):
            return None
        with self._session() as db:
            return (
                db.query(Event)
                .filter(Event.name == name, Event.category_id == category_id)
                .first()
            )

    def get_events_by_category(self, category_id: int) -> list[Event]:
        if not _valid_id(category_id):
            return []
        with self._session() as db:
            return (
                db.query(Event)
                .filter(Event.category_id == category_id)
                .order_by(Event.id)
                .all()
            )

    def create_event(self, name: str, category_id: int) -> Event:
        return self._add(Event(name=name, category_id=category_id))

    def get_categories_with_events(self) -> list[dict]:
        with self.lock:
            return [
                {"category": category, "events": self.get_events_by_category(category.id)}
                for category in self.get_categories()
            ]

    # -----------------------
    # Resultados
    # -----------------------
    def get_results(self) -> list[Result]:
        with self._session() as db:
            return db.query(Result).order_by(Result.id).all()

    def get_result(self, result_id: int) -> Result | None:
        if not _valid_id(result_id):
            return None
        with self._session() as db:
            return db.get(Result, result_id)

    def get_result_by_team_and_event(self, team_id: int, event_id: int) -> Result | None:
        if not _valid_id(team_id, event_id):
            return None
        with self._session() as db:
            return (
                db.query(Result)
                .filter(Result.team_id == team_id, Result.event_id == event_id)
                .order_by(Result.id)
                .first()
            )

    def get_results_by_event(self, event_id: int) -> list[Result]:
        if not _valid_id(event_id):
            return []
        with self._session() as db:
            return (
                db.query(Result)
                .filter(Result.event_id == event_id)
                .order_by(Result.id)
                .all()
            )

    def get_results_by_team(self, team_id: int) -> list[Result]:
        if not _valid_id(team_id):
            return []
        with self._session() as db:
            return (
                db.query(Result)
                .filter(Result.team_id == team_id)
                .order_by(Result.id)
                .all()
            )

    def create_result(self, team_id: int, event_id: int, medal, points: int) -> Result:
        return self._add(Result(
            team_id=team_id,
            event_id=event_id,
            medal=Medal(medal).value,
            points=points
        ))

    def update_result(self, result_id: int, medal, points: int) -> Result | None:
        if not _valid_id(result_id):
            return None
        with self._session() as db:
            result = db.get(Result, result_id)
            if not result:
                return None
            result.medal = Medal(medal).value
            result.points = points
            db.flush()
            return result
