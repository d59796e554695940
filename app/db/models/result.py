# app/db/models/result.py
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.session import Base

class Result(Base):
    __tablename__ = "results"
    # Sin UniqueConstraint(team_id, event_id): la política "relaxed" permite
    # varios resultados por pareja equipo/evento

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    team_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), index=True, nullable=False)
    event_id: Mapped[int] = mapped_column(Integer, ForeignKey("events.id"), index=True, nullable=False)
    medal: Mapped[str] = mapped_column(String, nullable=False)
    points: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relaciones
    team: Mapped["Team"] = relationship("Team", back_populates="results")
    event: Mapped["Event"] = relationship("Event", back_populates="results")
