from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from app.database import get_db
from app.core.plantel import coincide_busqueda, coincide_nombre
from app.models.cuota import CuotaSocio
from app.models.jugador import Jugador
from app.schemas.cuota import CuotaCreate, CuotaResponse, CuotaUpdate, EstadoCuota

router = APIRouter()

TODOS = "Todos"

@router.get("/", response_model=List[CuotaResponse])
def listar_cuotas(
    busqueda: Optional[str] = Query(None, description="Nombre o DNI del socio"),
    disciplina: str = Query(TODOS, description="Nombre de disciplina o 'Todos'"),
    estado: Optional[EstadoCuota] = Query(None),
    db: Session = Depends(get_db)
):
    query = db.query(CuotaSocio).options(joinedload(CuotaSocio.player))
    if estado:
        query = query.filter(CuotaSocio.status == estado)
    cuotas = query.order_by(CuotaSocio.due_date.desc(), CuotaSocio.id).all()

    return [
        cuota for cuota in cuotas
        if coincide_busqueda(cuota.player, busqueda)
        and coincide_nombre(cuota.player.discipline, disciplina)
    ]

@router.get("/{cuota_id}", response_model=CuotaResponse)
def obtener_cuota(cuota_id: int, db: Session = Depends(get_db)):
    cuota = db.query(CuotaSocio).filter(CuotaSocio.id == cuota_id).first()
    if not cuota:
        raise HTTPException(status_code=404, detail="Cuota no encontrada")
    return cuota

@router.post("/", response_model=CuotaResponse, status_code=status.HTTP_201_CREATED)
def crear_cuota(payload: CuotaCreate, db: Session = Depends(get_db)):
    jugador = db.query(Jugador).filter(Jugador.id == payload.player_id).first()
    if not jugador:
        raise HTTPException(status_code=404, detail="Socio no encontrado")

    nueva = CuotaSocio(**payload.dict())
    db.add(nueva)
    db.commit()
    db.refresh(nueva)
    print(f"💰 [CUOTAS] Cuota registrada para {jugador.name}: ${nueva.amount} ({nueva.status})")
    return nueva

@router.put("/{cuota_id}", response_model=CuotaResponse)
def actualizar_cuota(cuota_id: int, payload: CuotaUpdate, db: Session = Depends(get_db)):
    cuota = db.query(CuotaSocio).filter(CuotaSocio.id == cuota_id).first()
    if not cuota:
        raise HTTPException(status_code=404, detail="Cuota no encontrada")

    for field, value in payload.dict(exclude_unset=True).items():
        setattr(cuota, field, value)

    db.commit()
    db.refresh(cuota)
    return cuota

@router.delete("/{cuota_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_cuota(cuota_id: int, db: Session = Depends(get_db)):
    cuota = db.query(CuotaSocio).filter(CuotaSocio.id == cuota_id).first()
    if not cuota:
        raise HTTPException(status_code=404, detail="Cuota no encontrada")
    db.delete(cuota)
    db.commit()
    return None
