# app/services/supabase_storage.py
from fastapi import UploadFile
from supabase import create_client
import uuid
from app.config import settings
from app.core.exceptions import StorageError

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}


class SupabaseStorage:
    def __init__(self):
        self._client = None
        self.bucket = settings.SUPABASE_BUCKET

    @property
    def client(self):
        # El cliente se crea al primer uso para que la API arranque sin credenciales
        if self._client is None:
            key = settings.SUPABASE_SERVICE_KEY or settings.SUPABASE_KEY
            if not settings.SUPABASE_URL or not key:
                raise StorageError("Supabase Storage no está configurado", configured=False)
            self._client = create_client(settings.SUPABASE_URL, key)
        return self._client

    async def upload_image(
        self,
        file: UploadFile,
        folder: str = "uploads",
        max_size_mb: int = 5
    ) -> str:
        """Sube imagen y retorna URL pública"""
        content = await file.read()
        if len(content) > max_size_mb * 1024 * 1024:
            raise ValueError(f"La imagen es demasiado grande (máximo {max_size_mb}MB)")

        filename = file.filename or "image"
        ext = filename.split('.')[-1].lower() if '.' in filename else ''
        if ext not in ALLOWED_EXTENSIONS:
            raise ValueError("Tipo de archivo no permitido. Use PNG, JPG, JPEG, GIF o WEBP")

        storage_path = f"{folder}/{uuid.uuid4().hex}.{ext}"
        bucket = self.client.storage.from_(self.bucket)

        try:
            bucket.upload(
                storage_path,
                content,
                {"content-type": file.content_type or f"image/{ext}"}
            )
            url = bucket.get_public_url(storage_path)
        except Exception as e:
            print(f"❌ [STORAGE] Error subiendo {storage_path}: {str(e)}")
            raise StorageError(f"Error al subir imagen: {str(e)}")

        print(f"✅ [STORAGE] Imagen subida: {storage_path}")
        return url


# Instancia global
storage_service = SupabaseStorage()


def get_storage():
    return storage_service
