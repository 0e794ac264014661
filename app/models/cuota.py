from sqlalchemy import Column, String, Integer, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from sqlalchemy.sql import func

class CuotaSocio(Base):
    __tablename__ = "member_fees"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(String(36), ForeignKey("players.id", ondelete="CASCADE"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(20), default="Pending")  # Pending, UpToDate, Late
    due_date = Column(Date, nullable=False)
    payment_method = Column(String(50), default="Efectivo")
    reference = Column(String(100))
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now())

    # Relaciones
    player = relationship("Jugador", back_populates="cuotas")
