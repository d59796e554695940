# Importa todos los modelos para que Base.metadata los conozca antes de create_all
from app.db.models.team import Team
from app.db.models.category import Category
from app.db.models.event import Event
from app.db.models.result import Result
from app.db.models.user import User

__all__ = ["Team", "Category", "Event", "Result", "User"]
