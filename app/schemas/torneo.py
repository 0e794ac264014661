from pydantic import BaseModel, Field, validator
from typing import List, Literal, Optional
import datetime as dt

from app.schemas.club import GeneroRama, genero_canonico

TipoIncidencia = Literal["Goal", "YellowCard", "RedCard", "Substitution"]

class TorneoBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    type: Literal["Professional", "Internal"] = "Professional"
    discipline_id: str
    category_id: str
    gender: GeneroRama

    @validator("gender", pre=True)
    def genero_sin_mayusculas(cls, v):
        return genero_canonico(v)

class TorneoCreate(TorneoBase):
    pass

class TorneoResponse(TorneoBase):
    id: int
    status: Literal["Open", "Closed"]
    created_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True

class Incidencia(BaseModel):
    type: TipoIncidencia
    player_id: str
    minute: Optional[int] = Field(None, ge=0, le=200)

class PartidoCreate(BaseModel):
    rival_name: str = Field(..., min_length=1, max_length=150)
    condition: Literal["Local", "Visitante"] = "Local"
    date: dt.date
    status: Literal["Scheduled", "Finished"] = "Scheduled"
    my_score: int = Field(0, ge=0)
    rival_score: int = Field(0, ge=0)
    group: str = "A"
    stage: str = "Fase Regular"
    incidents: List[Incidencia] = []

class PartidoResponse(BaseModel):
    id: int
    tournament_id: int
    home_team: str
    away_team: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    date: dt.date
    status: str
    group: Optional[str] = None
    stage: Optional[str] = None
    incidents: List[Incidencia] = []

    class Config:
        from_attributes = True

class FilaTabla(BaseModel):
    name: str
    pj: int
    pg: int
    pe: int
    pp: int
    gf: int
    gc: int
    pts: int
