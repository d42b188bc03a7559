"""
Extrator de telefone brasileiro
"""
import re

from app.core.utils import only_digits
from app.models.voice import Resolution

COUNTRY_CODE = "55"

# +55 (opcional), DDD (opcional, com ou sem parênteses), 4-5 dígitos, 4 dígitos
PHONE_PATTERN = re.compile(
    r'(?<!\d)(?:\+?55[\s-]?)?(?:\(?\d{2}\)?[\s-]?)?\d{4,5}[\s-]?\d{4}(?!\d)'
)


def normalize_phone(raw: str) -> str:
    """
    Normaliza um número para o formato 55 + DDD + número.
    Retorna "" quando não dá para montar 12 ou 13 dígitos com segurança.
    Exemplos:
    "11 98765-4321" -> "5511987654321"
    "98765-4321" -> "" (sem DDD, ambíguo)
    """
    digits = only_digits(raw)

    # Sem DDD não chutamos a área
    if len(digits) in (8, 9):
        return ""

    if len(digits) in (10, 11):
        digits = COUNTRY_CODE + digits
    elif len(digits) >= 12 and not digits.startswith(COUNTRY_CODE):
        digits = COUNTRY_CODE + digits

    if len(digits) not in (12, 13):
        return ""
    return digits


def extract_phone(transcript: str) -> Resolution[str]:
    """Procura o primeiro telefone no texto. Telefone é sempre opcional."""
    match = PHONE_PATTERN.search(transcript or "")
    if not match:
        return Resolution.fallback("")

    phone = normalize_phone(match.group(0))
    if not phone:
        return Resolution.fallback("")
    return Resolution.resolved(phone)
