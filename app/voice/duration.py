"""
Extrator de duração ("duração de N horas/minutos")
"""
import re

from app.models.voice import Resolution

DEFAULT_DURATION_MINUTES = 60

DURATION_PATTERN = re.compile(r'duração de (\d+)\s*(horas?|minutos?)', re.IGNORECASE)


def extract_duration(transcript: str) -> Resolution[int]:
    """
    Lê a duração em minutos. Sem a frase exata, usa 60 minutos.
    Exemplos:
    "reunião com duração de 2 horas" -> 120
    "call com duração de 45 minutos" -> 45
    """
    match = DURATION_PATTERN.search(transcript or "")
    if not match:
        return Resolution.fallback(DEFAULT_DURATION_MINUTES)

    value = int(match.group(1))
    if match.group(2).lower().startswith("hora"):
        value *= 60

    if value <= 0:
        return Resolution.fallback(DEFAULT_DURATION_MINUTES)
    return Resolution.resolved(value)


def strip_duration(text: str) -> str:
    """Remove a frase de duração para não ser confundida com horário"""
    return DURATION_PATTERN.sub(" ", text)
