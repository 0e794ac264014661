from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.config import settings
from app.core.club import genero_query, obtener_config, obtener_disciplina
from app.core.plantel import buscar_categoria, buscar_rama, resolver_plantel
from app.core.tabla import calcular_tabla
from app.models.jugador import Jugador
from app.models.torneo import Partido, Torneo
from app.schemas.torneo import (
    FilaTabla, PartidoCreate, PartidoResponse, TorneoCreate, TorneoResponse,
)

router = APIRouter()


def _obtener_torneo(db: Session, torneo_id: int) -> Torneo:
    torneo = db.query(Torneo).filter(Torneo.id == torneo_id).first()
    if not torneo:
        raise HTTPException(status_code=404, detail="Torneo no encontrado")
    return torneo


def _validar_incidencias(db: Session, torneo: Torneo, payload: PartidoCreate):
    """Cada incidencia debe referirse a un jugador del plantel del torneo."""
    if not payload.incidents:
        return
    disciplina = obtener_disciplina(db, torneo.discipline_id)
    plantel = resolver_plantel(db.query(Jugador).all(), disciplina, torneo.gender, torneo.category_id)
    ids_plantel = {j.id for j in plantel}
    ajenos = sorted({i.player_id for i in payload.incidents if i.player_id not in ids_plantel})
    if ajenos:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Jugadores fuera del plantel del torneo: {', '.join(ajenos)}"
        )


def _datos_partido(db: Session, payload: PartidoCreate) -> dict:
    config = obtener_config(db)
    club = config.name if config else settings.CLUB_NAME
    local = payload.condition == "Local"
    return {
        "home_team": club if local else payload.rival_name,
        "away_team": payload.rival_name if local else club,
        "home_score": payload.my_score if local else payload.rival_score,
        "away_score": payload.rival_score if local else payload.my_score,
        "date": payload.date,
        "status": payload.status,
        "group": payload.group,
        "stage": payload.stage,
        "incidents": [i.dict() for i in payload.incidents],
    }


@router.get("/", response_model=List[TorneoResponse])
def listar_torneos(
    disciplina_id: Optional[str] = Query(None),
    categoria_id: Optional[str] = Query(None),
    genero: Optional[str] = Depends(genero_query),
    db: Session = Depends(get_db)
):
    query = db.query(Torneo)
    if disciplina_id:
        query = query.filter(Torneo.discipline_id == disciplina_id)
    if categoria_id:
        query = query.filter(Torneo.category_id == categoria_id)
    if genero:
        query = query.filter(Torneo.gender == genero)
    return query.order_by(Torneo.id).all()

@router.post("/", response_model=TorneoResponse, status_code=status.HTTP_201_CREATED)
def crear_torneo(payload: TorneoCreate, db: Session = Depends(get_db)):
    disciplina = obtener_disciplina(db, payload.discipline_id)
    categoria = buscar_categoria(buscar_rama(disciplina, payload.gender), payload.category_id)
    if not categoria:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="La categoría no pertenece a la rama seleccionada"
        )

    nuevo = Torneo(**payload.dict(), status="Open")
    db.add(nuevo)
    db.commit()
    db.refresh(nuevo)
    print(f"🏆 [TORNEOS] Torneo creado: {nuevo.name} ({disciplina.name} {payload.gender} {categoria.name})")
    return nuevo

@router.delete("/{torneo_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_torneo(torneo_id: int, db: Session = Depends(get_db)):
    torneo = _obtener_torneo(db, torneo_id)
    db.delete(torneo)
    db.commit()
    return None

@router.get("/{torneo_id}/partidos", response_model=List[PartidoResponse])
def listar_partidos(torneo_id: int, db: Session = Depends(get_db)):
    _obtener_torneo(db, torneo_id)
    return db.query(Partido).filter(Partido.tournament_id == torneo_id).order_by(Partido.date, Partido.id).all()

@router.post("/{torneo_id}/partidos", response_model=PartidoResponse, status_code=status.HTTP_201_CREATED)
def crear_partido(torneo_id: int, payload: PartidoCreate, db: Session = Depends(get_db)):
    torneo = _obtener_torneo(db, torneo_id)
    _validar_incidencias(db, torneo, payload)

    partido = Partido(tournament_id=torneo.id, **_datos_partido(db, payload))
    db.add(partido)
    db.commit()
    db.refresh(partido)
    return partido

@router.put("/{torneo_id}/partidos/{partido_id}", response_model=PartidoResponse)
def actualizar_partido(torneo_id: int, partido_id: int, payload: PartidoCreate, db: Session = Depends(get_db)):
    torneo = _obtener_torneo(db, torneo_id)
    partido = db.query(Partido).filter(
        Partido.id == partido_id,
        Partido.tournament_id == torneo_id
    ).first()
    if not partido:
        raise HTTPException(status_code=404, detail="Partido no encontrado")
    _validar_incidencias(db, torneo, payload)

    for field, value in _datos_partido(db, payload).items():
        setattr(partido, field, value)

    db.commit()
    db.refresh(partido)
    return partido

@router.delete("/partidos/{partido_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_partido(partido_id: int, db: Session = Depends(get_db)):
    partido = db.query(Partido).filter(Partido.id == partido_id).first()
    if not partido:
        raise HTTPException(status_code=404, detail="Partido no encontrado")
    db.delete(partido)
    db.commit()
    return None

@router.get("/{torneo_id}/tabla", response_model=List[FilaTabla])
def tabla_posiciones(torneo_id: int, db: Session = Depends(get_db)):
    _obtener_torneo(db, torneo_id)
    partidos = db.query(Partido).filter(Partido.tournament_id == torneo_id).order_by(Partido.date, Partido.id).all()
    return calcular_tabla(partidos)
