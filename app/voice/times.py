"""
Extração e resolução de horário
"""
import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from app.models.voice import Resolution
from app.voice.duration import strip_duration
from app.voice.rules import Rule, first_match, matches, search_group

logger = logging.getLogger(__name__)

# Horários canônicos por período do dia
PERIOD_TIMES = {
    "manhã": (9, 0),
    "tarde": (14, 0),
    "noite": (19, 0),
}

EXPLICIT_TIME_PATTERN = re.compile(r'(?<![\d/])(\d{1,2})[h:](\d{2})?(?![\d/])')
AT_PATTERN = re.compile(r'\bàs\s+(.*)')
LEADING_NUMBER_PATTERN = re.compile(r'^(\d{1,2})(?!\d)')
PERIOD_PATTERN = re.compile(r'\b(manh[ãa]|tarde|noite)\b')
HOURS_PATTERN = re.compile(r'(?<![\d/])(\d{1,2})\s*horas?\b')
TIME_VALUE_PATTERN = re.compile(r'^(\d{1,2})(?:[h:](\d{2})?)?$')


def _canonical_period(word: str) -> str:
    return "manhã" if word.startswith("manh") else word


def _extract_at(text: str) -> Optional[str]:
    rest = AT_PATTERN.search(text).group(1)
    number = LEADING_NUMBER_PATTERN.match(rest)
    if number:
        return number.group(1)
    period = PERIOD_PATTERN.search(rest)
    if period:
        return _canonical_period(period.group(1))
    return None


TIME_EXPRESSION_RULES = [
    Rule("explicit", matches(EXPLICIT_TIME_PATTERN), search_group(EXPLICIT_TIME_PATTERN)),
    Rule("at", matches(AT_PATTERN), _extract_at),
    Rule("period", matches(PERIOD_PATTERN),
         lambda text: _canonical_period(PERIOD_PATTERN.search(text).group(1))),
    Rule("hours", matches(HOURS_PATTERN), search_group(HOURS_PATTERN, 1)),
]


def extract_time_expression(transcript: str) -> str:
    """
    Isola a pista de horário. Vazio significa "agora".
    Exemplos:
    "reunião às 14h30" -> "14h30"
    "call às 10 horas da manhã" -> "10"
    "tarefa hoje à tarde" -> "tarde"
    """
    # "duração de 2 horas" não é horário
    text = strip_duration((transcript or "").lower())
    found = first_match(TIME_EXPRESSION_RULES, text)
    if not found:
        return ""
    logger.debug(f"Expressão de horário '{found[1]}' pela regra '{found[0]}'")
    return found[1]


def resolve_time(expression: str, now: datetime) -> Resolution[Tuple[int, int]]:
    """
    Converte a expressão em (hora, minuto).
    Sem expressão, ou com valor fora de 0-23/0-59, usa o relógio atual.
    """
    current = (now.hour, now.minute)
    expression = (expression or "").strip().lower()
    if not expression:
        return Resolution.fallback(current)

    for period, value in PERIOD_TIMES.items():
        if _canonical_period(expression) == period or period in expression:
            return Resolution.resolved(value)

    match = TIME_VALUE_PATTERN.match(expression)
    if not match:
        logger.warning(f"Horário não reconhecido: {expression}")
        return Resolution.fallback(current)

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        logger.warning(f"Horário fora do intervalo, ignorando: {expression}")
        return Resolution.fallback(current)

    return Resolution.resolved((hour, minute))
