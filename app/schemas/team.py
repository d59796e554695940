from pydantic import Field
from app.schemas.common import CamelModel

class TeamOut(CamelModel):
    id: int
    name: str
    color: str
    icon: str | None = None

class TeamIconUpdate(CamelModel):
    icon: str = Field(min_length=1)
