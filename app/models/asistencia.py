from sqlalchemy import Column, String, Integer, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base

class Asistencia(Base):
    __tablename__ = "attendance"
    __table_args__ = (UniqueConstraint("player_id", "fecha", name="uq_attendance_player_fecha"),)

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(String(36), ForeignKey("players.id", ondelete="CASCADE"), nullable=False)
    fecha = Column(Date, nullable=False, index=True)
    estado = Column(String(1), nullable=False)  # P, A, T

    # Relaciones
    player = relationship("Jugador", back_populates="asistencias")
