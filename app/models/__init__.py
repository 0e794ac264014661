from .club_config import ClubConfig
from .jugador import Jugador
from .cuota import CuotaSocio
from .asistencia import Asistencia
from .torneo import Torneo, Partido
from .equipo import Equipo

__all__ = [
    "ClubConfig", "Jugador", "CuotaSocio", "Asistencia", "Torneo", "Partido", "Equipo"
]
