"""
Extração e resolução de datas relativas/parciais em português
"""
import logging
import re
from datetime import date, datetime, timedelta
from typing import List, Optional

from app.core.exceptions import DateExpressionError
from app.models.voice import Resolution
from app.voice.rules import Rule, constant, first_match, matches, search_group

logger = logging.getLogger(__name__)

# Domingo = 0 ... Sábado = 6
WEEKDAYS = ["domingo", "segunda", "terça", "quarta", "quinta", "sexta", "sábado"]
WEEKDAY_PATTERNS = [
    re.compile(r'\bdomingo\b'),
    re.compile(r'\bsegunda\b'),
    re.compile(r'\bter[çc]a\b'),
    re.compile(r'\bquarta\b'),
    re.compile(r'\bquinta\b'),
    re.compile(r'\bsexta\b'),
    re.compile(r'\bs[áa]bado\b'),
]

MONTHS = {
    "janeiro": 1, "fevereiro": 2, "março": 3, "marco": 3, "abril": 4,
    "maio": 5, "junho": 6, "julho": 7, "agosto": 8, "setembro": 9,
    "outubro": 10, "novembro": 11, "dezembro": 12,
}

TODAY_PATTERN = re.compile(r'\bhoje\b')
TOMORROW_PATTERN = re.compile(r'\bamanh[ãa]\b')
NUMERIC_DATE_PATTERN = re.compile(r'(?<!\d)(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?(?![\d/])')
MONTH_DATE_PATTERN = re.compile(
    r'(?<!\d)\d{1,2}\s+de\s+(?:' + "|".join(MONTHS) + r')\b(?:\s+de\s+\d{2,4}\b)?'
)
MONTH_DATE_TEMPLATE = re.compile(r'^(\d{1,2})\s+de\s+([a-zçã]+)(?:\s+de\s+(\d{2,4}))?$')
DAY_OF_MONTH_PATTERN = re.compile(r'\bdia\s+(\d{1,2})\b')
NEXT_WEEKDAY_PATTERN = re.compile(r'^pr[óo]xim[ao]\s+(\S+)')


def _first_weekday(text: str) -> Optional[str]:
    """Nome canônico do dia da semana que aparece primeiro no texto"""
    found = []
    for index, pattern in enumerate(WEEKDAY_PATTERNS):
        match = pattern.search(text)
        if match:
            found.append((match.start(), index))
    if not found:
        return None
    return WEEKDAYS[min(found)[1]]


DATE_EXPRESSION_RULES = [
    Rule("today", matches(TODAY_PATTERN), constant("hoje")),
    Rule("tomorrow", matches(TOMORROW_PATTERN), constant("amanhã")),
    Rule("weekday", lambda text: _first_weekday(text) is not None,
         lambda text: f"próxima {_first_weekday(text)}"),
    Rule("numeric", matches(NUMERIC_DATE_PATTERN), search_group(NUMERIC_DATE_PATTERN)),
    Rule("month_name", matches(MONTH_DATE_PATTERN), search_group(MONTH_DATE_PATTERN)),
    Rule("day_of_month", matches(DAY_OF_MONTH_PATTERN),
         lambda text: "dia " + DAY_OF_MONTH_PATTERN.search(text).group(1)),
]


def extract_date_expression(transcript: str) -> str:
    """
    Isola a pista de data do texto. Vazio significa "hoje" por padrão.
    Exemplos:
    "Reunião com João amanhã às 14h" -> "amanhã"
    "reunião na segunda" -> "próxima segunda"
    "evento em 05/12/2024" -> "05/12/2024"
    """
    found = first_match(DATE_EXPRESSION_RULES, (transcript or "").lower())
    if not found:
        return ""
    logger.debug(f"Expressão de data '{found[1]}' pela regra '{found[0]}'")
    return found[1]


def _expand_year(raw: Optional[str], today: date) -> int:
    if not raw:
        return today.year
    if len(raw) == 2:
        return 2000 + int(raw)
    return int(raw)


def parse_month_date(expression: str, today: date) -> date:
    """
    Interpreta "DD de <mês> [de YYYY]".
    Levanta DateExpressionError se o texto não seguir o modelo.
    """
    match = MONTH_DATE_TEMPLATE.match(expression.strip().lower())
    if not match:
        raise DateExpressionError(f"Data fora do modelo 'DD de mês': {expression!r}")

    month = MONTHS.get(match.group(2))
    if not month:
        raise DateExpressionError(f"Mês desconhecido: {match.group(2)!r}")

    try:
        return date(_expand_year(match.group(3), today), month, int(match.group(1)))
    except ValueError as e:
        raise DateExpressionError(f"Data inválida {expression!r}: {e}") from e


def _resolve_next_weekday(expression: str, today: date) -> Optional[date]:
    name = NEXT_WEEKDAY_PATTERN.match(expression).group(1)
    target = _first_weekday(name)
    if target is None:
        return None

    current = today.isoweekday() % 7
    days = (WEEKDAYS.index(target) - current + 7) % 7
    # "próxima segunda" dita numa segunda é a da semana que vem
    if days == 0:
        days = 7
    return today + timedelta(days=days)


def _resolve_numeric(expression: str, today: date) -> Optional[date]:
    match = NUMERIC_DATE_PATTERN.search(expression)
    day, month, year = match.group(1), match.group(2), match.group(3)
    try:
        return date(_expand_year(year, today), int(month), int(day))
    except ValueError:
        logger.warning(f"Data numérica inválida: {expression}")
        return None


def _resolve_month_name(expression: str, today: date) -> Optional[date]:
    try:
        return parse_month_date(expression, today)
    except DateExpressionError as e:
        logger.warning(f"Não consegui interpretar a data, usando hoje: {e}")
        return None


def _resolve_day_of_month(expression: str, today: date) -> Optional[date]:
    day = int(DAY_OF_MONTH_PATTERN.search(expression).group(1))
    year, month = today.year, today.month
    if day < today.day:
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    try:
        return date(year, month, day)
    except ValueError:
        logger.warning(f"Dia do mês inválido: {expression}")
        return None


def _resolver_rules(today: date) -> List[Rule]:
    return [
        Rule("today", lambda e: e == "hoje", constant(today)),
        Rule("tomorrow", lambda e: e in ("amanhã", "amanha"), constant(today + timedelta(days=1))),
        Rule("next_weekday", matches(NEXT_WEEKDAY_PATTERN), lambda e: _resolve_next_weekday(e, today)),
        Rule("numeric", matches(NUMERIC_DATE_PATTERN), lambda e: _resolve_numeric(e, today)),
        Rule("month_name", matches(MONTH_DATE_TEMPLATE), lambda e: _resolve_month_name(e, today)),
        Rule("day_of_month", matches(DAY_OF_MONTH_PATTERN), lambda e: _resolve_day_of_month(e, today)),
    ]


def resolve_date(expression: str, now: datetime) -> Resolution[date]:
    """
    Converte a expressão de data em data concreta, relativa a `now`.
    Qualquer falha vira o padrão (hoje), nunca uma exceção.
    """
    today = now.date()
    expression = (expression or "").strip().lower()
    if not expression:
        return Resolution.fallback(today)

    found = first_match(_resolver_rules(today), expression)
    if not found:
        return Resolution.fallback(today)
    return Resolution.resolved(found[1])
