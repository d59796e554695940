from app.schemas.common import CamelModel

class TeamStandingOut(CamelModel):
    team_id: int
    team_name: str
    team_color: str
    total_points: int
    gold_count: int
    silver_count: int
    bronze_count: int
