# app/core/club.py

from typing import List, Optional
from fastapi import HTTPException, Query
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestException, NotFoundException
from app.core.plantel import buscar_disciplina, normalizar
from app.models.club_config import ClubConfig
from app.schemas.club import GENEROS, Disciplina, genero_canonico

CLUB_CONFIG_ID = 1


def obtener_config(db: Session) -> Optional[ClubConfig]:
    return db.query(ClubConfig).filter(ClubConfig.id == CLUB_CONFIG_ID).first()


def cargar_disciplinas(db: Session) -> List[Disciplina]:
    """Árbol de disciplinas del club, validado. Lista vacía si no hay configuración."""
    config = obtener_config(db)
    if not config:
        return []
    return [Disciplina.model_validate(d) for d in (config.disciplines or [])]


def obtener_disciplina(db: Session, disciplina_id: str) -> Disciplina:
    disciplina = buscar_disciplina(cargar_disciplinas(db), disciplina_id)
    if not disciplina:
        raise NotFoundException("Disciplina no encontrada")
    return disciplina


def validar_disciplinas(disciplinas: List[Disciplina]) -> None:
    """Los ids de categoría deben ser únicos dentro de cada disciplina."""
    ids_disciplina = set()
    for disciplina in disciplinas:
        if disciplina.id in ids_disciplina:
            raise BadRequestException(f"Id de disciplina duplicado: {disciplina.id}")
        ids_disciplina.add(disciplina.id)

        ids_categoria = set()
        for rama in disciplina.branches:
            for categoria in rama.categories:
                if categoria.id in ids_categoria:
                    raise BadRequestException(
                        f"Id de categoría duplicado en {disciplina.name}: {categoria.id}"
                    )
                ids_categoria.add(categoria.id)


def genero_query(
    genero: Optional[str] = Query(None, description="Rama: Masculino o Femenino")
) -> Optional[str]:
    """Parámetro `genero` de los listados, sin distinguir mayúsculas. Vacío equivale a sin rama."""
    if not normalizar(genero):
        return None
    canonico = genero_canonico(genero)
    if canonico not in GENEROS:
        raise HTTPException(
            status_code=422,
            detail=f"Género inválido: {genero}. Use Masculino o Femenino"
        )
    return canonico
