"""
Classificador de tipo de evento
"""
import logging
import re

from app.models.voice import Classification, EventCategory
from app.voice.rules import Rule, constant, contains_any, first_match

logger = logging.getLogger(__name__)

MEETING_WORDS = ("reunião", "reuniao", "meeting")
DEADLINE_WORDS = ("prazo", "deadline", "entrega")
TASK_WORDS = ("tarefa", "task")

# Pistas secundárias: conversa/entrevista/ligação, entrega/conclusão, fazer/revisar
SECONDARY_MEETING_WORDS = ("call", "conversa", "entrevista", "ligação", "ligacao", "ligar", "chamada")
SECONDARY_DEADLINE_WORDS = ("entregar", "concluir", "finalizar", "terminar", "vencimento")
SECONDARY_TASK_WORDS = ("fazer", "revisar", "revisão", "revisao", "preparar", "organizar")

SCHEDULE_PATTERN = re.compile(r'\b(agendar|marcar)\b\s*(.*)')
SCHEDULE_MEETING_PATTERN = re.compile(r'^(?:uma\s+|a\s+)?reuni[ãa]o')

SECONDARY_RULES = [
    Rule("secondary_meeting", contains_any(*SECONDARY_MEETING_WORDS), constant(EventCategory.MEETING)),
    Rule("secondary_deadline", contains_any(*SECONDARY_DEADLINE_WORDS), constant(EventCategory.DEADLINE)),
    Rule("secondary_task", contains_any(*SECONDARY_TASK_WORDS), constant(EventCategory.TASK)),
]


def schedule_continuation(text: str) -> str:
    """Texto que vem depois de "agendar"/"marcar" (vazio se o verbo não aparece)"""
    match = SCHEDULE_PATTERN.search(text)
    return match.group(2).strip() if match else ""


def _classify_schedule(text: str) -> EventCategory:
    continuation = schedule_continuation(text)
    if SCHEDULE_MEETING_PATTERN.match(continuation):
        return EventCategory.MEETING

    found = first_match(SECONDARY_RULES, continuation)
    return found[1] if found else EventCategory.OTHER


# A ordem é a precedência: substantivos explícitos > "agendar" > pistas soltas
CATEGORY_RULES = [
    Rule("meeting", contains_any(*MEETING_WORDS), constant(EventCategory.MEETING)),
    Rule("deadline", contains_any(*DEADLINE_WORDS), constant(EventCategory.DEADLINE)),
    Rule("task", contains_any(*TASK_WORDS), constant(EventCategory.TASK)),
    Rule("schedule", lambda text: bool(SCHEDULE_PATTERN.search(text)), _classify_schedule),
] + SECONDARY_RULES


def classify(transcript: str) -> Classification:
    """
    Classifica o evento em meeting/deadline/task/other.
    Exemplos:
    "Reunião com João amanhã" -> meeting (regra "meeting")
    "Agendar call com cliente" -> meeting (regra "schedule")
    "xyz" -> other (regra "none")
    """
    text = (transcript or "").lower()
    found = first_match(CATEGORY_RULES, text)

    if not found:
        logger.debug("Nenhuma pista de categoria, usando 'other'")
        return Classification(category=EventCategory.OTHER, rule="none")

    rule, category = found
    logger.debug(f"Categoria {category.value} pela regra '{rule}'")
    return Classification(category=category, rule=rule)
