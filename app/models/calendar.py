"""
Calendar Models
"""
from pydantic import BaseModel, Field
from typing import List, Optional

from app.models.voice import ResolvedEvent


class VoiceCommandRequest(BaseModel):
    """Transcrição final entregue pelo reconhecimento de voz"""
    transcript: str = Field(..., description="Ex: 'Reunião com João amanhã às 14h'")


class CreateVoiceEventResponse(BaseModel):
    """Modelo de resposta da criação de evento por voz"""
    status: str
    id: Optional[str] = None
    event: ResolvedEvent
    calendar_synced: bool = False


class ListVoiceEventsResponse(BaseModel):
    """Modelo de resposta de lista de eventos"""
    status: str
    events: List[dict]
    count: int
