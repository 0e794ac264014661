from typing import Any


def apto_vencido(jugador: Any) -> bool:
    """
    Verifica si el apto médico del jugador no está vigente.

    Un jugador sin registro médico cargado se considera vencido.
    """
    medical = jugador.medical or {}
    return not medical.get("is_fit", False)
