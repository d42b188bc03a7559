"""
Montagem de título e descrição do evento
"""
import re
from typing import Iterable, Optional

from app.core.utils import squash_spaces, truncate
from app.models.voice import Classification, EventCategory

GENERIC_TITLE = "Novo evento"
SCHEDULE_TITLE = "Evento agendado"

FALLBACK_WORDS = 5
FALLBACK_MAX_CHARS = 30

# O front de voz às vezes prefixa a saída com "guardando "
FILLER_PATTERN = re.compile(r'^guardando\s+', re.IGNORECASE)
SCHEDULE_VERB_PATTERN = re.compile(r'\b(?:agendar|marcar)\b\s*', re.IGNORECASE)

TEMPLATE_TERMINATORS = (" às ", ",")
SCHEDULE_TERMINATORS = (" para ", " às ")
FALLBACK_TERMINATORS = (" para ", " às ", " em ")

# categoria -> (frases gatilho, prefixo do título)
CATEGORY_TEMPLATES = {
    EventCategory.MEETING: (("reunião com ", "reuniao com "), "Reunião com "),
    EventCategory.DEADLINE: (("prazo para ",), "Prazo para "),
    EventCategory.TASK: (("tarefa de ",), "Tarefa de "),
}


def build_description(transcript: str) -> str:
    """Texto original, sem espaços nas pontas e sem o prefixo "guardando " """
    return FILLER_PATTERN.sub("", (transcript or "").strip(), count=1)


def _cut(text: str, terminators: Iterable[str]) -> str:
    """Texto até o primeiro terminador encontrado (ou até o fim)"""
    lower = text.lower()
    positions = [pos for pos in (lower.find(t) for t in terminators) if pos >= 0]
    end = min(positions) if positions else len(text)
    return text[:end].strip(" ,.;")


def _segment_after(text: str, phrases: Iterable[str], terminators: Iterable[str]) -> Optional[str]:
    lower = text.lower()
    for phrase in phrases:
        idx = lower.find(phrase)
        if idx >= 0:
            return _cut(text[idx + len(phrase):], terminators)
    return None


def _template_title(text: str, category: EventCategory) -> str:
    if category not in CATEGORY_TEMPLATES:
        return ""
    phrases, prefix = CATEGORY_TEMPLATES[category]
    segment = _segment_after(text, phrases, TEMPLATE_TERMINATORS)
    return prefix + segment if segment else ""


def _schedule_title(text: str) -> str:
    match = SCHEDULE_VERB_PATTERN.search(text)
    if not match:
        return ""
    # espaço à esquerda para "agendar para ..." casar com " para "
    segment = _cut(" " + text[match.end():], SCHEDULE_TERMINATORS)
    return f"Evento: {segment}" if segment else SCHEDULE_TITLE


def _fallback_title(text: str) -> str:
    lower = text.lower()
    positions = [pos for pos in (lower.find(t) for t in FALLBACK_TERMINATORS) if pos >= 0]
    if positions:
        head = text[:min(positions)].strip(" ,.;")
        if head:
            return head

    words = text.split()[:FALLBACK_WORDS]
    return truncate(" ".join(words), FALLBACK_MAX_CHARS)


def build_title(description: str, classification: Classification) -> str:
    """
    Deriva um título curto. Ordem de tentativa:
    1. Modelo da categoria ("Reunião com ...", "Prazo para ...", "Tarefa de ...")
    2. "Evento: ..." quando a regra disparada foi "agendar"/"marcar"
    3. Texto antes de " para ", " às " ou " em "
    4. Primeiras cinco palavras (até 30 caracteres)
    """
    text = squash_spaces(description)
    if not text:
        return GENERIC_TITLE

    title = _template_title(text, classification.category)
    if not title and classification.rule == "schedule":
        title = _schedule_title(text)
    if not title:
        title = _fallback_title(text)

    return title or GENERIC_TITLE
