from pydantic import BaseModel
from typing import Dict, List, Literal, Optional
from datetime import date

from app.schemas.jugador import JugadorResponse

# P = presente, A = ausente, T = tarde
EstadoAsistencia = Literal["P", "A", "T"]

class PlanillaAsistencia(BaseModel):
    fecha: date
    registros: Dict[str, EstadoAsistencia]

class AsistenciaResponse(BaseModel):
    id: int
    player_id: str
    fecha: date
    estado: EstadoAsistencia

    class Config:
        from_attributes = True

class FilaPlanilla(BaseModel):
    jugador: JugadorResponse
    estado: Optional[EstadoAsistencia] = None

class PlanillaResponse(BaseModel):
    fecha: date
    disciplina: str
    genero: Optional[str] = None
    categoria: Optional[str] = None
    filas: List[FilaPlanilla]
