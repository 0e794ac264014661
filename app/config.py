# app/config.py

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Database (sqlite local con datos mock, o la URL Postgres de Supabase)
    DATABASE_URL: str = "sqlite:///./plegma.db"
    SEED_MOCK_DATA: bool = True

    # Club
    CLUB_NAME: str = "PLEGMA FC"

    # Supabase Storage
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None          # anon public key
    SUPABASE_SERVICE_KEY: Optional[str] = None  # service_role key
    SUPABASE_BUCKET: str = "plegma"

    # =======================================================
    # 🤖 INFORMES TÉCNICOS CON IA (Gemini)
    # =======================================================
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-1.5-pro"
    GEMINI_TIMEOUT_SECONDS: int = 30

    # CORS
    FRONTEND_URLS: str = "http://localhost:5173,http://localhost:3000"

    @property
    def allowed_origins(self) -> List[str]:
        urls = self.FRONTEND_URLS.split(",")
        all_urls = []
        for url in urls:
            url = url.strip()
            if url:
                all_urls.append(url)
                # Añadir versión HTTPS si es HTTP
                if url.startswith("http://"):
                    all_urls.append(url.replace("http://", "https://"))
        return all_urls

    class Config:
        env_file = ".env"

settings = Settings()
