"""
Testes unitários do classificador de categoria.

Precedência: substantivos explícitos (reunião/prazo/tarefa) > verbo
"agendar" > pistas secundárias > other.
"""

import pytest

from app.models.voice import EventCategory
from app.voice.classifier import classify, schedule_continuation
from app.voice.rules import Rule, constant, first_match


# ============================================================================
# REGRAS EXPLÍCITAS
# ============================================================================

@pytest.mark.parametrize("transcript, category, rule", [
    ("Reunião com João amanhã às 14h", EventCategory.MEETING, "meeting"),
    ("meeting with the team", EventCategory.MEETING, "meeting"),
    ("Prazo para o projeto X na próxima segunda", EventCategory.DEADLINE, "deadline"),
    ("entrega do relatório na sexta", EventCategory.DEADLINE, "deadline"),
    ("Criar tarefa de revisão do portfólio", EventCategory.TASK, "task"),
])
def test_explicit_nouns(transcript, category, rule):
    result = classify(transcript)

    assert result.category == category
    assert result.rule == rule


def test_meeting_outranks_deadline():
    """Reunião vem antes de entrega na cascata"""
    assert classify("reunião para entrega do relatório").category == EventCategory.MEETING


def test_agendar_reuniao_is_meeting():
    assert classify("Agendar uma reunião amanhã").category == EventCategory.MEETING


# ============================================================================
# VERBO "AGENDAR"
# ============================================================================

def test_agendar_uses_secondary_cues_on_continuation():
    result = classify("Agendar call com cliente para dia 15")

    assert result.category == EventCategory.MEETING
    assert result.rule == "schedule"


def test_marcar_is_a_schedule_verb():
    result = classify("marcar conversa com Ana na quinta")

    assert result.category == EventCategory.MEETING
    assert result.rule == "schedule"


def test_agendar_without_cues_is_other():
    result = classify("agendar dentista amanhã")

    assert result.category == EventCategory.OTHER
    assert result.rule == "schedule"


def test_schedule_continuation():
    assert schedule_continuation("por favor agendar call amanhã") == "call amanhã"
    assert schedule_continuation("reunião amanhã") == ""


# ============================================================================
# PISTAS SECUNDÁRIAS E FALLBACK
# ============================================================================

@pytest.mark.parametrize("transcript, category", [
    ("entrevista com candidato amanhã", EventCategory.MEETING),
    ("finalizar relatório até sexta", EventCategory.DEADLINE),
    ("revisar contrato hoje", EventCategory.TASK),
])
def test_secondary_cues(transcript, category):
    assert classify(transcript).category == category


def test_no_cue_is_other():
    result = classify("xyz")

    assert result.category == EventCategory.OTHER
    assert result.rule == "none"


def test_first_match_skips_empty_extraction():
    """Regra que casa mas não extrai nada não encerra a cascata"""
    rules = [
        Rule("empty", lambda text: True, constant("")),
        Rule("second", lambda text: "b" in text, constant("B")),
    ]

    assert first_match(rules, "abc") == ("second", "B")
    assert first_match(rules, "xyz") is None
