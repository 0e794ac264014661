from pydantic import BaseModel, Field
from typing import Dict, Literal, Optional

EstadoJugador = Literal["Active", "Injured", "Suspended"]

class RegistroMedico(BaseModel):
    is_fit: bool = True
    last_checkup: Optional[str] = None
    expiry_date: Optional[str] = None
    notes: Optional[str] = None

class JugadorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    dni: str = Field("", max_length=30)
    number: Optional[str] = Field(None, max_length=10)
    position: Optional[str] = Field(None, max_length=50)
    discipline: str = Field(..., min_length=1, max_length=100)
    category: str = Field("", max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=150)
    photo_url: Optional[str] = None
    overall_rating: Optional[int] = Field(None, ge=0, le=100)
    stats: Dict[str, int] = {}
    medical: Optional[RegistroMedico] = None
    status: EstadoJugador = "Active"

class JugadorCreate(JugadorBase):
    pass

class JugadorUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    dni: Optional[str] = Field(None, max_length=30)
    number: Optional[str] = Field(None, max_length=10)
    position: Optional[str] = Field(None, max_length=50)
    discipline: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=150)
    photo_url: Optional[str] = None
    overall_rating: Optional[int] = Field(None, ge=0, le=100)
    stats: Optional[Dict[str, int]] = None
    medical: Optional[RegistroMedico] = None
    status: Optional[EstadoJugador] = None

class JugadorResponse(JugadorBase):
    id: str

    class Config:
        from_attributes = True

class InformeResponse(BaseModel):
    player_id: str
    informe: str
