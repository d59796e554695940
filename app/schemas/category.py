from app.schemas.common import CamelModel

class CategoryOut(CamelModel):
    id: int
    name: str
    color: str

class EventOut(CamelModel):
    id: int
    name: str
    category_id: int

class CategoryWithEventsOut(CamelModel):
    category: CategoryOut
    events: list[EventOut]
