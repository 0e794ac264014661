from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func

from app.database import get_db
from app.config import settings
from app.core.club import cargar_disciplinas, obtener_config
from app.core.core import apto_vencido
from app.core.plantel import normalizar
from app.models.cuota import CuotaSocio
from app.models.jugador import Jugador
from app.schemas.dashboard import DashboardResumen

router = APIRouter()

@router.get("/resumen", response_model=DashboardResumen)
def resumen_dashboard(db: Session = Depends(get_db)):
    config = obtener_config(db)
    jugadores = db.query(Jugador).order_by(Jugador.name).all()

    # Nombre normalizado -> nombre para mostrar, tomado de la configuración si existe
    nombres = {normalizar(d.name): d.name for d in cargar_disciplinas(db)}

    por_estado = {"Active": 0, "Injured": 0, "Suspended": 0}
    por_disciplina = {}
    for jugador in jugadores:
        por_estado[jugador.status] = por_estado.get(jugador.status, 0) + 1
        nombre = nombres.setdefault(normalizar(jugador.discipline), (jugador.discipline or "").strip())
        por_disciplina[nombre] = por_disciplina.get(nombre, 0) + 1

    cuotas_por_estado = {"Pending": 0, "UpToDate": 0, "Late": 0}
    filas = db.query(
        CuotaSocio.status,
        func.count(CuotaSocio.id).label("cantidad")
    ).group_by(CuotaSocio.status).all()
    for fila in filas:
        cuotas_por_estado[fila.status] = fila.cantidad

    pendiente = db.query(func.sum(CuotaSocio.amount)).filter(
        CuotaSocio.status.in_(["Pending", "Late"])
    ).scalar()

    return DashboardResumen(
        club=config.name if config else settings.CLUB_NAME,
        total_jugadores=len(jugadores),
        jugadores_por_estado=por_estado,
        aptos_vencidos=sum(1 for j in jugadores if apto_vencido(j)),
        cuotas_por_estado=cuotas_por_estado,
        monto_pendiente=float(pendiente) if pendiente else 0,
        jugadores_por_disciplina=por_disciplina,
    )
