from .club import *
from .jugador import *
from .cuota import *
from .asistencia import *
from .torneo import *
from .dashboard import *
from .equipo import *

__all__ = [
    # Club
    "Metrica", "Categoria", "Rama", "Disciplina",
    "ClubConfigBase", "ClubConfigUpdate", "ClubConfigResponse",
    "ResumenCategoria", "ResumenRama", "ResumenDisciplina",

    # Jugador
    "RegistroMedico", "JugadorBase", "JugadorCreate", "JugadorUpdate", "JugadorResponse",
    "InformeResponse",

    # Cuota
    "CuotaBase", "CuotaCreate", "CuotaUpdate", "CuotaResponse",

    # Asistencia
    "PlanillaAsistencia", "AsistenciaResponse", "FilaPlanilla", "PlanillaResponse",

    # Torneo
    "TorneoCreate", "TorneoResponse", "Incidencia", "PartidoCreate", "PartidoResponse", "FilaTabla",

    # Dashboard
    "DashboardResumen",

    # Equipo
    "EquipoBase", "EquipoCreate", "EquipoUpdate", "EquipoResponse",
]
