"""
Voice Command Models
"""
from datetime import datetime, timedelta
from enum import Enum
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

RESOLVED = "resolved"
FALLBACK = "fallback"


class EventCategory(str, Enum):
    """Categorias fechadas de evento"""
    MEETING = "meeting"
    DEADLINE = "deadline"
    TASK = "task"
    OTHER = "other"


class Resolution(BaseModel, Generic[T]):
    """
    Resultado marcado de um extrator/resolvedor.

    `source` diz se o valor foi lido do texto ("resolved") ou se é o
    padrão aplicado por falta de padrão reconhecido ("fallback").
    """
    value: T
    source: Literal["resolved", "fallback"]

    @classmethod
    def resolved(cls, value: T) -> "Resolution[T]":
        return cls(value=value, source=RESOLVED)

    @classmethod
    def fallback(cls, value: T) -> "Resolution[T]":
        return cls(value=value, source=FALLBACK)

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK


class Classification(BaseModel):
    """Categoria escolhida e a regra que disparou"""
    category: EventCategory
    rule: str


class ParsedFragments(BaseModel):
    """Fragmentos intermediários produzidos pelos extratores (não persistidos)"""
    date_expression: str = ""
    time_expression: str = ""
    raw_title: str = ""
    raw_description: str = ""
    candidate_phone: str = ""
    candidate_duration_minutes: Optional[int] = None


class ResolvedEvent(BaseModel):
    """Evento estruturado entregue pelo interpretador"""
    success: bool
    title: str
    description: str = ""
    occurs_at: datetime
    duration_minutes: int = Field(default=60, gt=0)
    category: EventCategory = EventCategory.OTHER
    contact_phone: str = ""
    defaults: List[str] = Field(default_factory=list)

    @property
    def ends_at(self) -> datetime:
        return self.occurs_at + timedelta(minutes=self.duration_minutes)
