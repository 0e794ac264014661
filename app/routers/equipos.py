from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.core.club import cargar_disciplinas, genero_query, obtener_disciplina
from app.core.plantel import buscar_categoria, buscar_disciplina, buscar_rama, resolver_plantel
from app.models.equipo import Equipo
from app.models.jugador import Jugador
from app.schemas.equipo import EquipoCreate, EquipoResponse, EquipoUpdate

router = APIRouter()


def _obtener_equipo(db: Session, equipo_id: int) -> Equipo:
    equipo = db.query(Equipo).filter(Equipo.id == equipo_id).first()
    if not equipo:
        raise HTTPException(status_code=404, detail="Equipo no encontrado")
    return equipo


def _respuesta(equipo: Equipo, disciplinas, jugadores) -> EquipoResponse:
    """
    Estructura del equipo con los nombres de disciplina y categoría y la
    cantidad de jugadores de su plantel. Si la categoría ya no existe en la
    configuración del club, el equipo queda sin plantel.
    """
    disciplina = buscar_disciplina(disciplinas, equipo.discipline_id)
    categoria = buscar_categoria(buscar_rama(disciplina, equipo.gender), equipo.category_id)
    plantel = resolver_plantel(jugadores, disciplina, equipo.gender, equipo.category_id) if categoria else []

    return EquipoResponse(
        id=equipo.id,
        discipline_id=equipo.discipline_id,
        gender=equipo.gender,
        category_id=equipo.category_id,
        coach=equipo.coach,
        physical_trainer=equipo.physical_trainer or "",
        medical_staff=equipo.medical_staff or "",
        discipline_name=disciplina.name if disciplina else None,
        category_name=categoria.name if categoria else None,
        players_count=len(plantel),
    )


@router.get("/", response_model=List[EquipoResponse])
def listar_equipos(
    disciplina_id: Optional[str] = Query(None),
    genero: Optional[str] = Depends(genero_query),
    db: Session = Depends(get_db)
):
    query = db.query(Equipo)
    if disciplina_id:
        query = query.filter(Equipo.discipline_id == disciplina_id)
    if genero:
        query = query.filter(Equipo.gender == genero)

    disciplinas = cargar_disciplinas(db)
    jugadores = db.query(Jugador).all()
    return [_respuesta(e, disciplinas, jugadores) for e in query.order_by(Equipo.id).all()]

@router.get("/{equipo_id}", response_model=EquipoResponse)
def obtener_equipo(equipo_id: int, db: Session = Depends(get_db)):
    equipo = _obtener_equipo(db, equipo_id)
    return _respuesta(equipo, cargar_disciplinas(db), db.query(Jugador).all())

@router.post("/", response_model=EquipoResponse, status_code=status.HTTP_201_CREATED)
def crear_equipo(payload: EquipoCreate, db: Session = Depends(get_db)):
    disciplina = obtener_disciplina(db, payload.discipline_id)
    categoria = buscar_categoria(buscar_rama(disciplina, payload.gender), payload.category_id)
    if not categoria:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="La categoría no pertenece a la rama seleccionada"
        )

    existente = db.query(Equipo).filter(
        Equipo.discipline_id == payload.discipline_id,
        Equipo.gender == payload.gender,
        Equipo.category_id == payload.category_id
    ).first()
    if existente:
        raise HTTPException(status_code=400, detail="Ya existe un equipo para esa categoría")

    nuevo = Equipo(**payload.dict())
    db.add(nuevo)
    db.commit()
    db.refresh(nuevo)
    print(f"✅ [EQUIPOS] Equipo creado: {disciplina.name} {payload.gender} {categoria.name} (DT {nuevo.coach})")
    return _respuesta(nuevo, cargar_disciplinas(db), db.query(Jugador).all())

@router.put("/{equipo_id}", response_model=EquipoResponse)
def actualizar_equipo(equipo_id: int, payload: EquipoUpdate, db: Session = Depends(get_db)):
    equipo = _obtener_equipo(db, equipo_id)

    for field, value in payload.dict(exclude_unset=True).items():
        setattr(equipo, field, value)

    db.commit()
    db.refresh(equipo)
    return _respuesta(equipo, cargar_disciplinas(db), db.query(Jugador).all())

@router.delete("/{equipo_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_equipo(equipo_id: int, db: Session = Depends(get_db)):
    equipo = _obtener_equipo(db, equipo_id)
    db.delete(equipo)
    db.commit()
    return None
