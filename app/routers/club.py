from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.club import CLUB_CONFIG_ID, obtener_config, validar_disciplinas
from app.core.exceptions import StorageError
from app.models.club_config import ClubConfig
from app.schemas.club import ClubConfigResponse, ClubConfigUpdate
from app.services.supabase_storage import get_storage

router = APIRouter()

@router.get("/", response_model=ClubConfigResponse)
def get_club_config(db: Session = Depends(get_db)):
    config = obtener_config(db)
    if not config:
        raise HTTPException(status_code=404, detail="El club aún no fue configurado")
    return config

@router.put("/", response_model=ClubConfigResponse)
def update_club_config(config_data: ClubConfigUpdate, db: Session = Depends(get_db)):
    validar_disciplinas(config_data.disciplines)

    config = obtener_config(db)
    if not config:
        config = ClubConfig(id=CLUB_CONFIG_ID)
        db.add(config)

    # Solo los campos enviados; el logo subido y los colores se conservan
    datos = config_data.dict(exclude_unset=True)
    for field, value in datos.items():
        setattr(config, field, value)

    db.commit()
    db.refresh(config)
    print(f"✅ [CLUB] Configuración actualizada: {len(config.disciplines or [])} disciplinas")
    return config

@router.post("/logo", response_model=ClubConfigResponse)
async def upload_logo(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage=Depends(get_storage)
):
    config = obtener_config(db)
    if not config:
        raise HTTPException(status_code=404, detail="El club aún no fue configurado")

    try:
        config.logo_url = await storage.upload_image(file, folder="club")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR if e.configured else status.HTTP_503_SERVICE_UNAVAILABLE
        raise HTTPException(status_code=code, detail=e.message)

    db.commit()
    db.refresh(config)
    return config
