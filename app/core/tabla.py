# app/core/tabla.py

from typing import Any, Dict, Iterable, List


def _fila(nombre: str) -> Dict[str, Any]:
    return {"name": nombre, "pj": 0, "pg": 0, "pe": 0, "pp": 0, "gf": 0, "gc": 0, "pts": 0}


def calcular_tabla(partidos: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Tabla de posiciones a partir de los partidos finalizados.
    Victoria 3 puntos, empate 1. Ordena por puntos y luego diferencia de gol.
    """
    tabla: Dict[str, Dict[str, Any]] = {}

    for partido in partidos:
        if partido.status != "Finished":
            continue
        for equipo in (partido.home_team, partido.away_team):
            if equipo not in tabla:
                tabla[equipo] = _fila(equipo)

        local = tabla[partido.home_team]
        visitante = tabla[partido.away_team]
        goles_local = partido.home_score or 0
        goles_visitante = partido.away_score or 0

        local["pj"] += 1
        visitante["pj"] += 1
        local["gf"] += goles_local
        local["gc"] += goles_visitante
        visitante["gf"] += goles_visitante
        visitante["gc"] += goles_local

        if goles_local > goles_visitante:
            local["pg"] += 1
            local["pts"] += 3
            visitante["pp"] += 1
        elif goles_local < goles_visitante:
            visitante["pg"] += 1
            visitante["pts"] += 3
            local["pp"] += 1
        else:
            local["pe"] += 1
            visitante["pe"] += 1
            local["pts"] += 1
            visitante["pts"] += 1

    return sorted(tabla.values(), key=lambda f: (f["pts"], f["gf"] - f["gc"]), reverse=True)
