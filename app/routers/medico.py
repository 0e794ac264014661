from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Literal, Optional

from app.database import get_db
from app.core.club import genero_query, obtener_disciplina
from app.core.core import apto_vencido
from app.core.plantel import resolver_plantel
from app.models.jugador import Jugador
from app.schemas.jugador import JugadorResponse, RegistroMedico

router = APIRouter()

@router.get("/", response_model=List[JugadorResponse])
def listar_medico(
    filtro: Literal["all", "injured", "expired"] = Query("all"),
    disciplina_id: Optional[str] = Query(None, description="Limita al plantel de la disciplina"),
    genero: Optional[str] = Depends(genero_query),
    categoria_id: Optional[str] = Query(None),
    busqueda: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    jugadores = db.query(Jugador).order_by(Jugador.name).all()
    if disciplina_id:
        disciplina = obtener_disciplina(db, disciplina_id)
        jugadores = resolver_plantel(jugadores, disciplina, genero, categoria_id, busqueda)

    if filtro == "injured":
        return [j for j in jugadores if j.status == "Injured"]
    if filtro == "expired":
        return [j for j in jugadores if apto_vencido(j)]
    return jugadores

@router.put("/{jugador_id}", response_model=JugadorResponse)
def actualizar_registro_medico(jugador_id: str, registro: RegistroMedico, db: Session = Depends(get_db)):
    jugador = db.query(Jugador).filter(Jugador.id == jugador_id).first()
    if not jugador:
        raise HTTPException(status_code=404, detail="Jugador no encontrado")

    jugador.medical = registro.dict()
    db.commit()
    db.refresh(jugador)
    print(f"✅ [MEDICO] Registro médico actualizado para {jugador.name}")
    return jugador
