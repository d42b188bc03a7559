"""
Interpretador de comandos de voz -> evento estruturado

Pipeline fixo, sem estado entre chamadas:
telefone -> duração -> categoria -> título/descrição -> expressão de data
-> data -> expressão de horário -> horário -> montagem.

Cada etapa tem um padrão seguro, então o interpretador só falha para
transcrição vazia; o resto degrada campo a campo.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from app.models.voice import EventCategory, ParsedFragments, ResolvedEvent
from app.voice.classifier import classify
from app.voice.dates import extract_date_expression, resolve_date
from app.voice.duration import DEFAULT_DURATION_MINUTES, extract_duration
from app.voice.phone import extract_phone
from app.voice.times import extract_time_expression, resolve_time
from app.voice.title import GENERIC_TITLE, build_description, build_title

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def parse_fragments(transcript: str) -> ParsedFragments:
    """Roda apenas os extratores (sem resolver data/hora)"""
    phone = extract_phone(transcript)
    duration = extract_duration(transcript)
    description = build_description(transcript)
    classification = classify(description)

    return ParsedFragments(
        date_expression=extract_date_expression(description),
        time_expression=extract_time_expression(description),
        raw_title=build_title(description, classification),
        raw_description=description,
        candidate_phone=phone.value,
        candidate_duration_minutes=None if duration.is_fallback else duration.value,
    )


def interpret(transcript: str, clock: Optional[Clock] = None) -> ResolvedEvent:
    """
    Transforma a transcrição em ResolvedEvent.

    Args:
        transcript: texto bruto vindo do reconhecimento de voz
        clock: fonte do "agora" (padrão datetime.now), lida uma única vez

    Returns:
        ResolvedEvent com success=False apenas para texto vazio
    """
    now = (clock or datetime.now)()

    if not transcript or not transcript.strip():
        logger.info("Comando de voz vazio, nada a interpretar")
        return ResolvedEvent(
            success=False,
            title=GENERIC_TITLE,
            description="",
            occurs_at=now.replace(second=0, microsecond=0),
            duration_minutes=DEFAULT_DURATION_MINUTES,
            category=EventCategory.OTHER,
            contact_phone="",
            defaults=["title", "occurs_at", "duration_minutes", "category", "contact_phone"],
        )

    phone = extract_phone(transcript)
    duration = extract_duration(transcript)
    description = build_description(transcript)
    classification = classify(description)
    title = build_title(description, classification)

    date_expression = extract_date_expression(description)
    event_date = resolve_date(date_expression, now)
    time_expression = extract_time_expression(description)
    event_time = resolve_time(time_expression, now)

    hour, minute = event_time.value
    occurs_at = datetime(event_date.value.year, event_date.value.month, event_date.value.day,
                         hour, minute, tzinfo=now.tzinfo)

    defaults = []
    if event_date.is_fallback:
        defaults.append("date")
    if event_time.is_fallback:
        defaults.append("time")
    if duration.is_fallback:
        defaults.append("duration_minutes")
    if classification.category == EventCategory.OTHER:
        defaults.append("category")
    if phone.is_fallback:
        defaults.append("contact_phone")

    logger.info(
        f"Comando interpretado: '{title}' ({classification.category.value}) em "
        f"{occurs_at.isoformat()} [data='{date_expression}', hora='{time_expression}']"
    )

    return ResolvedEvent(
        success=True,
        title=title,
        description=description,
        occurs_at=occurs_at,
        duration_minutes=duration.value,
        category=classification.category,
        contact_phone=phone.value,
        defaults=defaults,
    )
