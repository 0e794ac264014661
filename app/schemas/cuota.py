from pydantic import BaseModel, condecimal
from typing import Literal, Optional
from datetime import date

from app.schemas.jugador import JugadorResponse

EstadoCuota = Literal["Pending", "UpToDate", "Late"]

class CuotaBase(BaseModel):
    player_id: str
    amount: condecimal(max_digits=10, decimal_places=2, ge=0) = 0
    status: EstadoCuota = "Pending"
    due_date: date
    payment_method: str = "Efectivo"
    reference: Optional[str] = None

class CuotaCreate(CuotaBase):
    pass

class CuotaUpdate(BaseModel):
    amount: Optional[condecimal(max_digits=10, decimal_places=2, ge=0)] = None
    status: Optional[EstadoCuota] = None
    due_date: Optional[date] = None
    payment_method: Optional[str] = None
    reference: Optional[str] = None

class CuotaResponse(CuotaBase):
    id: int
    player: Optional[JugadorResponse] = None

    class Config:
        from_attributes = True
