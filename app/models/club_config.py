from sqlalchemy import Column, String, Integer, JSON, DateTime
from sqlalchemy.sql import func
from app.database import Base

class ClubConfig(Base):
    __tablename__ = "club_config"

    # Fila única (id = 1)
    id = Column(Integer, primary_key=True, default=1)
    name = Column(String(150), nullable=False)
    logo_url = Column(String(500))
    primary_color = Column(String(20), default="#2563eb")
    secondary_color = Column(String(20), default="#0f172a")
    # Árbol disciplina -> ramas -> categorías
    disciplines = Column(JSON, nullable=False, default=list)
    fecha_actualizacion = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
