# app/core/seed.py

from sqlalchemy.orm import Session

from app.core.club import CLUB_CONFIG_ID, obtener_config
from app.models.club_config import ClubConfig
from app.models.equipo import Equipo
from app.models.jugador import Jugador

DISCIPLINAS_MOCK = [
    {
        "id": "futbol",
        "name": "Fútbol",
        "sport_type": "Fútbol",
        "enabled": True,
        "branches": [
            {
                "gender": "Masculino",
                "enabled": True,
                "categories": [
                    {"id": "fut-m-primera", "name": "Primera", "metrics": []},
                    {"id": "fut-m-reserva", "name": "Reserva", "metrics": []},
                    {"id": "fut-m-sub20", "name": "Sub-20", "metrics": []},
                ],
            },
            {
                "gender": "Femenino",
                "enabled": True,
                "categories": [
                    {"id": "fut-f-primera", "name": "Primera", "metrics": []},
                    {"id": "fut-f-reserva", "name": "Reserva", "metrics": []},
                ],
            },
        ],
    },
    {
        "id": "basquet",
        "name": "Básquet",
        "sport_type": "Básquet",
        "enabled": True,
        "branches": [
            {
                "gender": "Masculino",
                "enabled": True,
                "categories": [
                    {"id": "bas-m-primera", "name": "Primera", "metrics": []},
                    {"id": "bas-m-sub20", "name": "Sub-20", "metrics": []},
                ],
            },
        ],
    },
    {
        "id": "voley",
        "name": "Vóley",
        "sport_type": "Vóley",
        "enabled": True,
        "branches": [
            {"gender": "Femenino", "enabled": True, "categories": []},
        ],
    },
]

_STATS_BASE = {"pace": 70, "shooting": 65, "passing": 72, "dribbling": 68, "defending": 60, "physical": 74}

JUGADORES_MOCK = [
    {"name": "Lucas Benítez", "dni": "30111222", "number": "9", "position": "Delantero",
     "discipline": "Fútbol", "category": "Primera", "gender": "Masculino", "overall_rating": 84},
    {"name": "Martín Sosa", "dni": "31222333", "number": "1", "position": "Arquero",
     "discipline": "Fútbol", "category": "Primera", "gender": "Masculino", "overall_rating": 79},
    {"name": "Diego Ferreyra", "dni": "32333444", "number": "5", "position": "Volante",
     "discipline": "Fútbol", "category": "Reserva", "gender": "Masculino", "overall_rating": 71,
     "status": "Injured"},
    {"name": "Ana López", "dni": "33444555", "number": "10", "position": "Volante",
     "discipline": "Fútbol", "category": "Primera", "gender": "Femenino", "overall_rating": 82},
    {"name": "Bea Ruiz", "dni": "34555666", "number": "4", "position": "Defensora",
     "discipline": "Fútbol", "category": "Reserva", "gender": "Femenino", "overall_rating": 68},
    {"name": "Tomás Acosta", "dni": "35666777", "number": "23", "position": "Base",
     "discipline": "Básquet", "category": "Primera", "gender": "Masculino", "overall_rating": 77},
    {"name": "Nicolás Vera", "dni": "36777888", "number": "11", "position": "Alero",
     "discipline": "Básquet", "category": "Sub-20", "gender": "Masculino", "overall_rating": 66,
     "medical": {"is_fit": False, "last_checkup": "2024-01-10", "expiry_date": "2025-01-10",
                 "notes": "Apto vencido"}},
    {"name": "Julia Paz", "dni": "37888999", "number": "7", "position": "Armadora",
     "discipline": "Vóley", "category": "Primera", "gender": "Femenino", "overall_rating": 75},
    {"name": "Carla Méndez", "dni": "38999000", "number": "3", "position": "Líbero",
     "discipline": "Vóley", "category": "Primera", "gender": None, "overall_rating": None,
     "status": "Suspended"},
]

EQUIPOS_MOCK = [
    {"discipline_id": "futbol", "gender": "Masculino", "category_id": "fut-m-primera",
     "coach": "Carlo Ancelotti", "physical_trainer": "Antonio Pintus", "medical_staff": "Dr. House"},
    {"discipline_id": "futbol", "gender": "Masculino", "category_id": "fut-m-reserva",
     "coach": "Marcelo Gallardo", "physical_trainer": "Pablo Dolce", "medical_staff": "Dr. Rossi"},
    {"discipline_id": "basquet", "gender": "Masculino", "category_id": "bas-m-primera",
     "coach": "Steve Kerr", "physical_trainer": "Ron Adams", "medical_staff": "Dr. Smith"},
]


def sembrar_datos_mock(db: Session, club_name: str) -> bool:
    """Carga configuración y jugadores de ejemplo si la base está vacía."""
    if obtener_config(db) is not None or db.query(Jugador).first() is not None:
        return False

    db.add(ClubConfig(id=CLUB_CONFIG_ID, name=club_name, disciplines=DISCIPLINAS_MOCK))
    for datos in JUGADORES_MOCK:
        jugador = Jugador(
            stats=dict(_STATS_BASE),
            medical=datos.get("medical") or {"is_fit": True, "last_checkup": "2025-02-01",
                                             "expiry_date": "2026-02-01", "notes": ""},
            status=datos.get("status", "Active"),
            **{k: v for k, v in datos.items() if k not in ("medical", "status")},
        )
        db.add(jugador)
    for datos in EQUIPOS_MOCK:
        db.add(Equipo(**datos))
    db.commit()
    print(f"✅ [SEED] Datos mock cargados: {len(JUGADORES_MOCK)} jugadores, {len(EQUIPOS_MOCK)} equipos")
    return True
