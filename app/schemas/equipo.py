from pydantic import BaseModel, Field, validator
from typing import Optional

from app.schemas.club import GeneroRama, genero_canonico

class EquipoBase(BaseModel):
    discipline_id: str
    gender: GeneroRama
    category_id: str
    coach: str = Field(..., min_length=1, max_length=150)
    physical_trainer: str = Field("", max_length=150)
    medical_staff: str = Field("", max_length=150)

    @validator("gender", pre=True)
    def genero_sin_mayusculas(cls, v):
        return genero_canonico(v)

class EquipoCreate(EquipoBase):
    pass

class EquipoUpdate(BaseModel):
    """Solo el cuerpo técnico; la categoría del equipo no cambia."""
    coach: Optional[str] = Field(None, min_length=1, max_length=150)
    physical_trainer: Optional[str] = Field(None, max_length=150)
    medical_staff: Optional[str] = Field(None, max_length=150)

class EquipoResponse(EquipoBase):
    id: int
    discipline_name: Optional[str] = None
    category_name: Optional[str] = None
    players_count: int = 0
