from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.club import cargar_disciplinas, obtener_disciplina
from app.core.core import apto_vencido
from app.core.plantel import resolver_plantel
from app.models.jugador import Jugador
from app.schemas.club import Disciplina, ResumenCategoria, ResumenDisciplina, ResumenRama

router = APIRouter()

@router.get("/", response_model=list[Disciplina])
def get_disciplinas(solo_activas: bool = False, db: Session = Depends(get_db)):
    disciplinas = cargar_disciplinas(db)
    if solo_activas:
        disciplinas = [d for d in disciplinas if d.enabled]
    return disciplinas

@router.get("/{disciplina_id}", response_model=Disciplina)
def get_disciplina(disciplina_id: str, db: Session = Depends(get_db)):
    return obtener_disciplina(db, disciplina_id)

@router.get("/{disciplina_id}/resumen", response_model=ResumenDisciplina)
def get_resumen_disciplina(disciplina_id: str, db: Session = Depends(get_db)):
    """
    Consola de la disciplina: totales del plantel y conteo por rama y categoría.
    """
    disciplina = obtener_disciplina(db, disciplina_id)
    jugadores = db.query(Jugador).all()
    plantel = resolver_plantel(jugadores, disciplina)

    ramas = []
    for rama in disciplina.branches:
        plantel_rama = resolver_plantel(plantel, disciplina, rama.gender)
        categorias = [
            ResumenCategoria(
                id=categoria.id,
                name=categoria.name,
                jugadores=len(resolver_plantel(plantel_rama, disciplina, rama.gender, categoria.id)),
            )
            for categoria in rama.categories
        ]
        ramas.append(ResumenRama(gender=rama.gender, jugadores=len(plantel_rama), categorias=categorias))

    return ResumenDisciplina(
        id=disciplina.id,
        name=disciplina.name,
        total_jugadores=len(plantel),
        lesionados=sum(1 for j in plantel if j.status == "Injured"),
        aptos_vencidos=sum(1 for j in plantel if apto_vencido(j)),
        ramas=ramas,
    )
