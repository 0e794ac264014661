import uuid
from sqlalchemy import Column, String, Integer, JSON, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base

class Jugador(Base):
    __tablename__ = "players"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(150), nullable=False)
    dni = Column(String(30), default="", index=True)
    number = Column(String(10))
    position = Column(String(50))
    # Texto libre: se compara por nombre normalizado contra la configuración del club
    discipline = Column(String(100), nullable=False)
    category = Column(String(100), default="")
    gender = Column(String(20))
    email = Column(String(150))
    photo_url = Column(String(500))
    overall_rating = Column(Integer)
    stats = Column(JSON, default=dict)
    medical = Column(JSON)
    status = Column(String(20), default="Active")  # Active, Injured, Suspended
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now())

    # Relaciones
    cuotas = relationship("CuotaSocio", back_populates="player", cascade="all, delete-orphan")
    asistencias = relationship("Asistencia", back_populates="player", cascade="all, delete-orphan")
