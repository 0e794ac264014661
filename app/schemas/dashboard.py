from pydantic import BaseModel
from typing import Dict

class DashboardResumen(BaseModel):
    club: str
    total_jugadores: int
    jugadores_por_estado: Dict[str, int]
    aptos_vencidos: int
    cuotas_por_estado: Dict[str, int]
    monto_pendiente: float
    jugadores_por_disciplina: Dict[str, int]
