from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Literal, Optional

from app.database import get_db
from app.core.club import genero_query, obtener_disciplina
from app.core.plantel import resolver_plantel
from app.models.jugador import Jugador
from app.schemas.jugador import JugadorResponse

router = APIRouter()

@router.get("/", response_model=List[JugadorResponse])
def get_plantel(
    disciplina_id: str = Query(..., description="Id de la disciplina seleccionada"),
    genero: Optional[str] = Depends(genero_query),
    categoria_id: Optional[str] = Query(None, description="Id de categoría dentro de la rama"),
    busqueda: Optional[str] = Query(None, description="Nombre o DNI"),
    ordenar: Optional[Literal["rating"]] = Query(None, description="'rating' ordena por valoración"),
    db: Session = Depends(get_db)
):
    """Plantel de una disciplina/rama/categoría (vista de equipos)."""
    disciplina = obtener_disciplina(db, disciplina_id)
    jugadores = db.query(Jugador).order_by(Jugador.name).all()
    return resolver_plantel(
        jugadores,
        disciplina,
        genero,
        categoria_id,
        busqueda,
        por_rating=ordenar == "rating",
    )
