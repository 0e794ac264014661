from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint
from app.database import Base
from sqlalchemy.sql import func

class Equipo(Base):
    __tablename__ = "team_structures"
    __table_args__ = (
        UniqueConstraint("discipline_id", "gender", "category_id", name="uq_equipo_categoria"),
    )

    id = Column(Integer, primary_key=True, index=True)
    discipline_id = Column(String(36), nullable=False, index=True)
    gender = Column(String(20), nullable=False)  # Masculino, Femenino
    category_id = Column(String(36), nullable=False)
    coach = Column(String(150), nullable=False)
    physical_trainer = Column(String(150), default="")
    medical_staff = Column(String(150), default="")
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now())
