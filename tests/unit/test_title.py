"""
Testes unitários de título e descrição.
"""

from app.models.voice import Classification, EventCategory
from app.voice.title import GENERIC_TITLE, SCHEDULE_TITLE, build_description, build_title


def _cls(category, rule=None):
    return Classification(category=category, rule=rule or category.value)


# ============================================================================
# DESCRIÇÃO
# ============================================================================

def test_description_is_verbatim_trimmed():
    assert build_description("  Reunião com João amanhã às 14h  ") == "Reunião com João amanhã às 14h"


def test_description_strips_leading_filler():
    """O front de voz às vezes prefixa com "guardando " """
    assert build_description("guardando Reunião amanhã") == "Reunião amanhã"
    assert build_description("Guardando tarefa hoje") == "tarefa hoje"


def test_description_keeps_filler_in_the_middle():
    assert build_description("tarefa guardando caixas") == "tarefa guardando caixas"


# ============================================================================
# MODELOS POR CATEGORIA
# ============================================================================

def test_meeting_title_until_as():
    title = build_title("Reunião com João amanhã às 14h", _cls(EventCategory.MEETING))

    assert title == "Reunião com João amanhã"


def test_meeting_title_until_comma():
    title = build_title("reunião com a equipe, amanhã", _cls(EventCategory.MEETING))

    assert title == "Reunião com a equipe"


def test_deadline_title():
    title = build_title("Prazo para o projeto X", _cls(EventCategory.DEADLINE))

    assert title == "Prazo para o projeto X"


def test_task_title():
    title = build_title("Criar tarefa de revisão do portfólio às 15h", _cls(EventCategory.TASK))

    assert title == "Tarefa de revisão do portfólio"


# ============================================================================
# "AGENDAR"
# ============================================================================

def test_schedule_title_before_para():
    title = build_title(
        "Agendar call com cliente para dia 15",
        Classification(category=EventCategory.MEETING, rule="schedule"),
    )

    assert title == "Evento: call com cliente"


def test_schedule_title_generic_label_when_empty():
    title = build_title("agendar para amanhã", Classification(category=EventCategory.OTHER, rule="schedule"))

    assert title == SCHEDULE_TITLE


# ============================================================================
# FALLBACK
# ============================================================================

def test_fallback_text_before_em():
    assert build_title("evento em 05/12/2024", _cls(EventCategory.OTHER, "none")) == "evento"


def test_fallback_meeting_without_template():
    """Reunião sem "reunião com" cai no fallback genérico"""
    title = build_title("Reunião para alinhar o roadmap", _cls(EventCategory.MEETING))

    assert title == "Reunião"


def test_fallback_first_words():
    assert build_title("xyz", _cls(EventCategory.OTHER, "none")) == "xyz"


def test_fallback_truncates_long_words():
    title = build_title(
        "Comprar presentes natalinos diferenciados urgentemente hoje",
        _cls(EventCategory.OTHER, "none"),
    )

    assert title.endswith("...")
    assert len(title) <= 33
    assert title.startswith("Comprar presentes")


def test_empty_description_gets_generic_title():
    assert build_title("   ", _cls(EventCategory.OTHER, "none")) == GENERIC_TITLE
