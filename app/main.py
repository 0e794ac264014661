# En main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.database import engine, Base, SessionLocal
from app.config import settings
from app.core.seed import sembrar_datos_mock
from app import models  # noqa: F401  registra las tablas en Base.metadata
from app.routers import (
    club,
    disciplinas,
    jugadores,
    plantel,
    asistencia,
    medico,
    cuotas,
    torneos,
    dashboard,
    equipos,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.SEED_MOCK_DATA:
        db = SessionLocal()
        try:
            sembrar_datos_mock(db, settings.CLUB_NAME)
        finally:
            db.close()
    yield


app = FastAPI(
    title="Gestión de Club Deportivo - PLEGMA",
    description="API para plantel, cuerpo técnico, asistencia, fichas médicas, cuotas y torneos del club",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configuración CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=[
        "Authorization",
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=600,
)

# Routers
app.include_router(club.router, prefix="/club", tags=["Club"])
app.include_router(disciplinas.router, prefix="/disciplinas", tags=["Disciplinas"])
app.include_router(jugadores.router, prefix="/jugadores", tags=["Jugadores"])
app.include_router(plantel.router, prefix="/plantel", tags=["Plantel"])
app.include_router(asistencia.router, prefix="/asistencia", tags=["Asistencia"])
app.include_router(medico.router, prefix="/medico", tags=["Médico"])
app.include_router(cuotas.router, prefix="/cuotas", tags=["Cuotas"])
app.include_router(torneos.router, prefix="/torneos", tags=["Torneos"])
app.include_router(equipos.router, prefix="/equipos", tags=["Equipos"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])

@app.get("/")
def read_root():
    return {
        "mensaje": "PLEGMA Club API funcionando correctamente",
        "version": "1.0.0"
    }

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": "PLEGMA Club API",
    }
