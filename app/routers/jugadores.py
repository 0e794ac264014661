from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Query, status
from sqlalchemy.orm import Session
from typing import Dict, List, Optional

from app.database import get_db
from app.core.exceptions import ReportServiceError, StorageError
from app.core.informe_service import get_informe_service
from app.core.plantel import coincide_busqueda, coincide_nombre
from app.models.jugador import Jugador
from app.schemas.jugador import (
    InformeResponse, JugadorCreate, JugadorResponse, JugadorUpdate,
)
from app.services.supabase_storage import get_storage

router = APIRouter()

TODAS = "Todas"


def _obtener_jugador(db: Session, jugador_id: str) -> Jugador:
    jugador = db.query(Jugador).filter(Jugador.id == jugador_id).first()
    if not jugador:
        raise HTTPException(status_code=404, detail="Jugador no encontrado")
    return jugador


def _filtrar(jugadores, disciplina: str, categoria: str, busqueda: Optional[str]):
    return [
        jugador for jugador in jugadores
        if coincide_nombre(jugador.discipline, disciplina)
        and coincide_nombre(jugador.category, categoria)
        and coincide_busqueda(jugador, busqueda)
    ]


@router.get("/", response_model=List[JugadorResponse])
def listar_jugadores(
    disciplina: str = Query(TODAS, description="Nombre de disciplina o 'Todas'"),
    categoria: str = Query(TODAS, description="Nombre de categoría o 'Todas'"),
    busqueda: Optional[str] = Query(None, description="Nombre o DNI"),
    db: Session = Depends(get_db)
):
    jugadores = db.query(Jugador).order_by(Jugador.name).all()
    return _filtrar(jugadores, disciplina, categoria, busqueda)

@router.get("/agrupados", response_model=Dict[str, Dict[str, List[JugadorResponse]]])
def listar_jugadores_agrupados(
    disciplina: str = Query(TODAS),
    categoria: str = Query(TODAS),
    db: Session = Depends(get_db)
):
    """
    Jugadores agrupados por disciplina y categoría, tal como se guardaron.
    """
    jugadores = db.query(Jugador).order_by(Jugador.name).all()
    agrupados: Dict[str, Dict[str, list]] = {}
    for jugador in _filtrar(jugadores, disciplina, categoria, None):
        por_categoria = agrupados.setdefault(jugador.discipline, {})
        por_categoria.setdefault(jugador.category or "", []).append(jugador)
    return agrupados

@router.get("/{jugador_id}", response_model=JugadorResponse)
def obtener_jugador(jugador_id: str, db: Session = Depends(get_db)):
    return _obtener_jugador(db, jugador_id)

@router.post("/", response_model=JugadorResponse, status_code=status.HTTP_201_CREATED)
def crear_jugador(payload: JugadorCreate, db: Session = Depends(get_db)):
    if payload.dni:
        existente = db.query(Jugador).filter(Jugador.dni == payload.dni).first()
        if existente:
            raise HTTPException(status_code=400, detail="Ya existe un jugador con ese DNI")

    nuevo = Jugador(**payload.dict())
    db.add(nuevo)
    db.commit()
    db.refresh(nuevo)
    print(f"✅ [JUGADORES] Jugador creado: {nuevo.name} ({nuevo.id})")
    return nuevo

@router.put("/{jugador_id}", response_model=JugadorResponse)
def actualizar_jugador(jugador_id: str, payload: JugadorUpdate, db: Session = Depends(get_db)):
    jugador = _obtener_jugador(db, jugador_id)

    if payload.dni and payload.dni != jugador.dni:
        existente = db.query(Jugador).filter(
            Jugador.dni == payload.dni,
            Jugador.id != jugador_id
        ).first()
        if existente:
            raise HTTPException(status_code=400, detail="Ya existe un jugador con ese DNI")

    for field, value in payload.dict(exclude_unset=True).items():
        setattr(jugador, field, value)

    db.commit()
    db.refresh(jugador)
    return jugador

@router.delete("/{jugador_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_jugador(jugador_id: str, db: Session = Depends(get_db)):
    jugador = _obtener_jugador(db, jugador_id)
    db.delete(jugador)
    db.commit()
    return None

@router.post("/{jugador_id}/foto", response_model=JugadorResponse)
async def subir_foto(
    jugador_id: str,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage=Depends(get_storage)
):
    jugador = _obtener_jugador(db, jugador_id)
    try:
        jugador.photo_url = await storage.upload_image(file, folder="jugadores")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR if e.configured else status.HTTP_503_SERVICE_UNAVAILABLE
        raise HTTPException(status_code=code, detail=e.message)

    db.commit()
    db.refresh(jugador)
    return jugador

@router.post("/{jugador_id}/informe", response_model=InformeResponse)
def generar_informe(
    jugador_id: str,
    db: Session = Depends(get_db),
    informe_service=Depends(get_informe_service)
):
    jugador = _obtener_jugador(db, jugador_id)
    try:
        texto = informe_service.generar_informe(jugador)
    except ReportServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return InformeResponse(player_id=jugador.id, informe=texto)
