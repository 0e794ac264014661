from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from app.database import get_db
from app.core.club import genero_query, obtener_disciplina
from app.core.plantel import buscar_categoria, buscar_rama, resolver_plantel
from app.models.asistencia import Asistencia
from app.models.jugador import Jugador
from app.schemas.asistencia import (
    AsistenciaResponse, FilaPlanilla, PlanillaAsistencia, PlanillaResponse,
)

router = APIRouter()

@router.get("/", response_model=List[AsistenciaResponse])
def listar_asistencia(fecha: date = Query(..., description="Fecha de la práctica"), db: Session = Depends(get_db)):
    return db.query(Asistencia).filter(Asistencia.fecha == fecha).order_by(Asistencia.id).all()

@router.get("/planilla", response_model=PlanillaResponse)
def get_planilla(
    disciplina_id: str = Query(...),
    fecha: date = Query(...),
    genero: Optional[str] = Depends(genero_query),
    categoria_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Plantel de la selección con el estado ya registrado para la fecha."""
    disciplina = obtener_disciplina(db, disciplina_id)
    categoria = buscar_categoria(buscar_rama(disciplina, genero), categoria_id)

    jugadores = db.query(Jugador).order_by(Jugador.name).all()
    plantel = resolver_plantel(jugadores, disciplina, genero, categoria_id)

    registros = db.query(Asistencia).filter(Asistencia.fecha == fecha).all()
    estados = {r.player_id: r.estado for r in registros}

    return PlanillaResponse(
        fecha=fecha,
        disciplina=disciplina.name,
        genero=genero,
        categoria=categoria.name if categoria else None,
        filas=[FilaPlanilla(jugador=j, estado=estados.get(j.id)) for j in plantel],
    )

@router.post("/", response_model=List[AsistenciaResponse], status_code=status.HTTP_201_CREATED)
def guardar_planilla(planilla: PlanillaAsistencia, db: Session = Depends(get_db)):
    ids = list(planilla.registros.keys())
    encontrados = {j.id for j in db.query(Jugador).filter(Jugador.id.in_(ids)).all()}
    faltantes = [i for i in ids if i not in encontrados]
    if faltantes:
        raise HTTPException(status_code=404, detail=f"Jugadores no encontrados: {', '.join(faltantes)}")

    existentes = {
        r.player_id: r
        for r in db.query(Asistencia).filter(
            Asistencia.fecha == planilla.fecha,
            Asistencia.player_id.in_(ids)
        ).all()
    }

    guardados = []
    try:
        for player_id, estado in planilla.registros.items():
            registro = existentes.get(player_id)
            if registro:
                registro.estado = estado
            else:
                registro = Asistencia(player_id=player_id, fecha=planilla.fecha, estado=estado)
                db.add(registro)
            guardados.append(registro)
        db.commit()
    except Exception as e:
        db.rollback()
        print(f"❌ [ASISTENCIA] Error al guardar planilla {planilla.fecha}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error al guardar asistencia: {str(e)}"
        )

    for registro in guardados:
        db.refresh(registro)
    print(f"✅ [ASISTENCIA] Planilla {planilla.fecha} guardada: {len(guardados)} registros")
    return guardados
