# app/core/informe_service.py

import requests
from app.core.exceptions import ReportServiceError
from app.config import settings


# Dependencia para que el router de jugadores pueda inyectar el servicio
def get_informe_service():
    return InformeService()


ETIQUETAS_STATS = [
    ("pace", "Ritmo (PAC)"),
    ("shooting", "Tiro (SHO)"),
    ("passing", "Pase (PAS)"),
    ("dribbling", "Regate (DRI)"),
    ("defending", "Defensa (DEF)"),
    ("physical", "Físico (PHY)"),
]


def construir_prompt(jugador) -> str:
    stats = jugador.stats or {}
    lineas_stats = "\n".join(
        f"  - {etiqueta}: {stats.get(clave, '-')}" for clave, etiqueta in ETIQUETAS_STATS
    )
    return (
        "Actúa como un director deportivo de élite. Analiza los siguientes datos y "
        "estadísticas del jugador para generar un informe técnico profesional en español:\n\n"
        "  Ficha Técnica:\n"
        f"  - Nombre: {jugador.name}\n"
        f"  - Posición: {jugador.position or '-'}\n"
        f"  - Categoría: {jugador.category or '-'}\n"
        f"  - Disciplina: {jugador.discipline}\n\n"
        "  Estadísticas (sobre 100):\n"
        f"{lineas_stats}\n\n"
        "  El reporte debe incluir:\n"
        "  1. Análisis de estilo de juego.\n"
        "  2. Top 3 Fortalezas técnicas.\n"
        "  3. Áreas críticas de mejora.\n"
        "  4. Recomendación táctica para el cuerpo técnico."
    )


class InformeService:
    def __init__(self):
        self.base_url = settings.GEMINI_API_URL
        self.api_key = settings.GEMINI_API_KEY
        self.model = settings.GEMINI_MODEL
        self.timeout = settings.GEMINI_TIMEOUT_SECONDS

    def generar_informe(self, jugador) -> str:
        """
        Llama a la API de Gemini (generateContent) y devuelve el texto del informe.
        """
        if not self.api_key:
            raise ReportServiceError("Servicio de IA no configurado (falta GEMINI_API_KEY)")

        endpoint = f"/models/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": construir_prompt(jugador)}]}]}
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(
                self.base_url + endpoint, json=payload, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            # Captura errores de red o errores HTTP (4xx/5xx)
            print(f"❌ [INFORME] Error llamando a Gemini para jugador {jugador.id}: {str(e)}")
            raise ReportServiceError(f"Error al generar el informe: {str(e)}")

        texto = self._extraer_texto(data)
        if not texto:
            raise ReportServiceError("Respuesta del servicio de IA vacía o inesperada.")
        return texto

    @staticmethod
    def _extraer_texto(data: dict) -> str:
        partes = []
        for candidato in data.get("candidates") or []:
            for parte in (candidato.get("content") or {}).get("parts") or []:
                if parte.get("text"):
                    partes.append(parte["text"])
        return "".join(partes).strip()
