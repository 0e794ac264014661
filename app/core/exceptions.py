# app/core/exceptions.py

from fastapi import HTTPException, status

class BadRequestException(HTTPException):
    def __init__(self, detail: str = "Solicitud inválida"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class ServiceUnavailableException(HTTPException):
    def __init__(self, detail: str = "Servicio externo no disponible"):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)

# =======================================================
# ☁️ EXCEPCIONES PARA SERVICIOS EXTERNOS
# =======================================================
class StorageError(Exception):
    """
    Error al comunicarse con Supabase Storage (subida de fotos y logos).
    `configured` es False cuando faltan las credenciales.
    """
    def __init__(self, message: str = "Error al comunicarse con el almacenamiento", configured: bool = True):
        self.message = message
        self.configured = configured
        super().__init__(self.message)

class ReportServiceError(Exception):
    """
    Error al generar un informe técnico con el proveedor de IA.
    """
    def __init__(self, message: str = "Error al conectar con el servicio de IA"):
        self.message = message
        super().__init__(self.message)
