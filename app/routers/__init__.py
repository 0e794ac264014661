from .club import router as club_router
from .disciplinas import router as disciplinas_router
from .jugadores import router as jugadores_router
from .plantel import router as plantel_router
from .asistencia import router as asistencia_router
from .medico import router as medico_router
from .cuotas import router as cuotas_router
from .torneos import router as torneos_router
from .dashboard import router as dashboard_router
from .equipos import router as equipos_router

__all__ = [
    "club_router", "disciplinas_router", "jugadores_router", "plantel_router",
    "asistencia_router", "medico_router", "cuotas_router", "torneos_router",
    "dashboard_router", "equipos_router"
]
