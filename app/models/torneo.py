from sqlalchemy import Column, String, Integer, Date, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from sqlalchemy.sql import func

class Torneo(Base):
    __tablename__ = "tournaments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    type = Column(String(20), default="Professional")  # Professional, Internal
    discipline_id = Column(String(36), nullable=False, index=True)
    category_id = Column(String(36), nullable=False)
    gender = Column(String(20), nullable=False)
    status = Column(String(20), default="Open")  # Open, Closed
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relaciones
    partidos = relationship("Partido", back_populates="torneo", cascade="all, delete-orphan")


class Partido(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)
    tournament_id = Column(Integer, ForeignKey("tournaments.id", ondelete="CASCADE"), nullable=False)
    home_team = Column(String(150), nullable=False)
    away_team = Column(String(150), nullable=False)
    home_score = Column(Integer)
    away_score = Column(Integer)
    date = Column(Date, nullable=False)
    status = Column(String(20), default="Scheduled")  # Scheduled, Finished
    group = Column(String(20))
    stage = Column(String(50))
    incidents = Column(JSON, default=list)

    # Relaciones
    torneo = relationship("Torneo", back_populates="partidos")
