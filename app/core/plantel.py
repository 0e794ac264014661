# app/core/plantel.py

from typing import Any, Iterable, List, Optional

from app.schemas.club import Categoria, Disciplina, Rama

# Valores de filtro que equivalen a "sin filtro"
COMODINES = ("", "todas", "todos")


def normalizar(texto: Optional[str]) -> str:
    """Recorta espacios y pasa a minúsculas. None se trata como cadena vacía."""
    return (texto or "").strip().lower()


def buscar_rama(disciplina: Optional[Disciplina], genero: Optional[str]) -> Optional[Rama]:
    """Primera rama de la disciplina cuyo género coincide (sin distinguir mayúsculas)."""
    if disciplina is None or not normalizar(genero):
        return None
    objetivo = normalizar(genero)
    for rama in disciplina.branches:
        if normalizar(rama.gender) == objetivo:
            return rama
    return None


def buscar_categoria(rama: Optional[Rama], categoria_id: Optional[str]) -> Optional[Categoria]:
    # Solo busca dentro de la rama seleccionada, nunca en otras ramas
    if rama is None or not categoria_id:
        return None
    for categoria in rama.categories:
        if categoria.id == categoria_id:
            return categoria
    return None


def coincide_busqueda(jugador: Any, busqueda: Optional[str]) -> bool:
    """Nombre que contiene el texto (normalizado) o DNI que lo contiene (literal)."""
    if not normalizar(busqueda):
        return True
    if normalizar(busqueda) in normalizar(jugador.name):
        return True
    # El DNI se compara sin normalizar
    return busqueda in (jugador.dni or "")


def coincide_nombre(valor: Optional[str], filtro: Optional[str]) -> bool:
    """
    Compara un nombre libre (disciplina o categoría) contra un filtro de listado.
    Filtro vacío, "Todas" o "Todos" no filtra.
    """
    if normalizar(filtro) in COMODINES:
        return True
    return normalizar(valor) == normalizar(filtro)


def resolver_plantel(
    jugadores: Iterable[Any],
    disciplina: Optional[Disciplina],
    genero: Optional[str] = None,
    categoria_id: Optional[str] = None,
    busqueda: Optional[str] = None,
    por_rating: bool = False,
) -> List[Any]:
    """
    Devuelve los jugadores que pertenecen a la selección disciplina/género/categoría.

    Los jugadores guardan disciplina y categoría como texto libre, así que la
    coincidencia es por nombre normalizado y no por id.

    - Sin disciplina el resultado es vacío.
    - Si la categoría no se puede resolver dentro de la rama del género pedido
      (sin rama, sin categoría elegida o id desconocido) no se filtra por categoría.
    - Un jugador sin género cargado entra en cualquier rama.
    - `busqueda` acepta el nombre (normalizado) o el DNI (literal).

    Mantiene el orden de entrada. Con `por_rating` ordena por `overall_rating`
    descendente (sin rating cuenta como 0) conservando el orden en los empates.
    No modifica la lista recibida.
    """
    if disciplina is None:
        return []

    nombre_disciplina = normalizar(disciplina.name)
    genero_pedido = normalizar(genero)
    categoria = buscar_categoria(buscar_rama(disciplina, genero), categoria_id)
    nombre_categoria = normalizar(categoria.name) if categoria else None

    resultado = []
    for jugador in jugadores:
        if normalizar(jugador.discipline) != nombre_disciplina:
            continue
        if nombre_categoria is not None and normalizar(jugador.category) != nombre_categoria:
            continue
        genero_jugador = normalizar(jugador.gender)
        if genero_jugador and genero_pedido and genero_jugador != genero_pedido:
            continue
        if not coincide_busqueda(jugador, busqueda):
            continue
        resultado.append(jugador)

    if por_rating:
        # sorted es estable también con reverse=True
        resultado = sorted(resultado, key=lambda j: j.overall_rating or 0, reverse=True)
    return resultado


def buscar_disciplina(disciplinas: Iterable[Disciplina], disciplina_id: str) -> Optional[Disciplina]:
    for disciplina in disciplinas:
        if disciplina.id == disciplina_id:
            return disciplina
    return None
