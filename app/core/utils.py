"""
Core utilities: digits, text helpers, ID normalization, etc.
"""
import re
from datetime import datetime
from typing import Union
from zoneinfo import ZoneInfo

from app.core.config import APP_TIMEZONE


def only_digits(value: str) -> str:
    """
    Remove tudo que não for dígito.
    Exemplos:
    "(11) 98765-4321" -> "11987654321"
    "+55 11 3333 4444" -> "551133334444"
    """
    return re.sub(r'\D', '', value or "")


def squash_spaces(text: str) -> str:
    """Colapsa espaços repetidos e remove as pontas"""
    return re.sub(r'\s+', ' ', text or "").strip()


def truncate(text: str, limit: int, suffix: str = "...") -> str:
    """Corta o texto em `limit` caracteres, acrescentando reticências se cortou"""
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + suffix


def format_datetime_br(value: datetime) -> str:
    """Formata datetime no padrão brasileiro (19/10/2026 às 14:00)"""
    return value.strftime('%d/%m/%Y às %H:%M')


def ensure_string_id(chat_id: Union[str, int]) -> str:
    """
    REGRA 1: Garante que chat_id/user_id seja sempre string.
    Usado em TODAS as interações com Firestore.
    """
    return str(chat_id)


def local_now() -> datetime:
    """Agora no fuso da aplicação (America/Sao_Paulo por padrão)"""
    return datetime.now(ZoneInfo(APP_TIMEZONE))


def to_local(value: datetime) -> datetime:
    """Converte um datetime com fuso para o fuso da aplicação"""
    if value.tzinfo is None:
        return value
    return value.astimezone(ZoneInfo(APP_TIMEZONE))
