from pydantic import BaseModel, Field, validator
from typing import List, Literal, Optional

GeneroRama = Literal["Masculino", "Femenino"]
GENEROS = ("Masculino", "Femenino")


def genero_canonico(valor):
    """Forma canónica del género sin importar mayúsculas ni espacios. Otros valores quedan igual."""
    if isinstance(valor, str):
        for genero in GENEROS:
            if valor.strip().lower() == genero.lower():
                return genero
    return valor


class Metrica(BaseModel):
    id: str
    name: str
    weight: float = Field(1, ge=0)

class Categoria(BaseModel):
    id: str
    name: str = Field(..., min_length=1, max_length=100)
    metrics: List[Metrica] = []

class Rama(BaseModel):
    gender: GeneroRama
    enabled: bool = True
    categories: List[Categoria] = []

    @validator("gender", pre=True)
    def genero_sin_mayusculas(cls, v):
        return genero_canonico(v)

class Disciplina(BaseModel):
    id: str
    name: str = Field(..., min_length=1, max_length=100)
    sport_type: str = "Otro"
    icon_url: Optional[str] = None
    enabled: bool = True
    branches: List[Rama] = []

class ClubConfigBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    logo_url: Optional[str] = None
    primary_color: str = "#2563eb"
    secondary_color: str = "#0f172a"
    disciplines: List[Disciplina] = []

class ClubConfigUpdate(ClubConfigBase):
    pass

class ClubConfigResponse(ClubConfigBase):
    id: int

    class Config:
        from_attributes = True

class ResumenCategoria(BaseModel):
    id: str
    name: str
    jugadores: int

class ResumenRama(BaseModel):
    gender: GeneroRama
    jugadores: int
    categorias: List[ResumenCategoria]

class ResumenDisciplina(BaseModel):
    id: str
    name: str
    total_jugadores: int
    lesionados: int
    aptos_vencidos: int
    ramas: List[ResumenRama]
