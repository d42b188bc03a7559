"""
Testes unitários de extração e resolução de datas.

Relógio fixo: segunda-feira, 19/10/2026 às 10:30.
"""

from datetime import date, datetime

import pytest

from app.core.exceptions import DateExpressionError
from app.voice.dates import extract_date_expression, parse_month_date, resolve_date
from conftest import FIXED_NOW

TODAY = FIXED_NOW.date()


# ============================================================================
# EXTRAÇÃO
# ============================================================================

@pytest.mark.parametrize("transcript, expected", [
    ("Reunião com João amanhã às 14h", "amanhã"),
    ("reunião amanha cedo", "amanhã"),
    ("tarefa hoje à tarde", "hoje"),
    ("hoje ou amanhã", "hoje"),
    ("reunião na segunda", "próxima segunda"),
    ("call na quinta-feira às 9h", "próxima quinta"),
    ("prazo no sabado", "próxima sábado"),
    ("evento em 05/12/2024", "05/12/2024"),
    ("call dia 15 de dezembro às 10 horas", "15 de dezembro"),
    ("entrega dia 25", "dia 25"),
    ("xyz", ""),
])
def test_extract_date_expression(transcript, expected):
    assert extract_date_expression(transcript) == expected


def test_weekday_outranks_numeric_date():
    assert extract_date_expression("reunião sexta 05/12") == "próxima sexta"


# ============================================================================
# RESOLUÇÃO RELATIVA
# ============================================================================

def test_empty_expression_is_today_fallback():
    result = resolve_date("", FIXED_NOW)

    assert result.value == TODAY
    assert result.is_fallback


def test_hoje_is_resolved_today():
    result = resolve_date("hoje", FIXED_NOW)

    assert result.value == TODAY
    assert result.source == "resolved"


def test_amanha():
    assert resolve_date("amanhã", FIXED_NOW).value == date(2026, 10, 20)


def test_same_weekday_rolls_a_full_week():
    """Segunda dita numa segunda é a da semana seguinte, nunca hoje"""
    assert resolve_date("próxima segunda", FIXED_NOW).value == date(2026, 10, 26)


@pytest.mark.parametrize("expression, expected", [
    ("próxima terça", date(2026, 10, 20)),
    ("próxima sexta", date(2026, 10, 23)),
    ("próxima sábado", date(2026, 10, 24)),
    ("próxima domingo", date(2026, 10, 25)),
])
def test_next_weekday(expression, expected):
    assert resolve_date(expression, FIXED_NOW).value == expected


# ============================================================================
# DATAS LITERAIS
# ============================================================================

@pytest.mark.parametrize("expression, expected", [
    ("05/12/2024", date(2024, 12, 5)),
    ("05/12/24", date(2024, 12, 5)),
    ("5/1", date(2026, 1, 5)),
])
def test_numeric_dates_day_month_year(expression, expected):
    """Dia/mês/ano na ordem brasileira, sem inverter"""
    assert resolve_date(expression, FIXED_NOW).value == expected


def test_invalid_numeric_date_falls_back():
    result = resolve_date("31/02/2026", FIXED_NOW)

    assert result.value == TODAY
    assert result.is_fallback


def test_month_name_dates():
    assert resolve_date("15 de dezembro", FIXED_NOW).value == date(2026, 12, 15)
    assert resolve_date("2 de março de 2027", FIXED_NOW).value == date(2027, 3, 2)


def test_malformed_month_name_falls_back():
    result = resolve_date("31 de fevereiro", FIXED_NOW)

    assert result.value == TODAY
    assert result.is_fallback


def test_parse_month_date_raises_on_unknown_month():
    with pytest.raises(DateExpressionError):
        parse_month_date("15 de dezembrx", TODAY)


# ============================================================================
# "DIA N"
# ============================================================================

def test_day_of_month_later_this_month():
    assert resolve_date("dia 25", FIXED_NOW).value == date(2026, 10, 25)


def test_day_of_month_today():
    assert resolve_date("dia 19", FIXED_NOW).value == TODAY


def test_day_of_month_rolls_to_next_month():
    """Dia já passado vai para o mês seguinte, nunca para o passado"""
    assert resolve_date("dia 5", FIXED_NOW).value == date(2026, 11, 5)


def test_day_of_month_rolls_over_year():
    assert resolve_date("dia 3", datetime(2026, 12, 20, 9, 0)).value == date(2027, 1, 3)


def test_impossible_day_of_month_falls_back():
    now = datetime(2026, 11, 10, 9, 0)
    result = resolve_date("dia 31", now)

    assert result.value == now.date()
    assert result.is_fallback
