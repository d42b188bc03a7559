"""
Web API Router - Para frontend (agenda e comandos de voz)
"""
import logging
from fastapi import APIRouter, HTTPException

from app.models.calendar import VoiceCommandRequest, CreateVoiceEventResponse, ListVoiceEventsResponse
from app.models.voice import ResolvedEvent
from app.use_cases.create_voice_event import CreateVoiceEventUseCase
from app.use_cases.list_voice_events import ListVoiceEventsUseCase
from app.core.utils import ensure_string_id, local_now
from app.voice.interpreter import interpret

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["web"])

# Use cases
create_voice_event_uc = CreateVoiceEventUseCase()
list_voice_events_uc = ListVoiceEventsUseCase()


@router.get("/health")
def health():
    """Health check endpoint"""
    return {"status": "ok", "service": "Agenda por Voz"}


@router.post("/voice/interpret", response_model=ResolvedEvent)
def interpret_voice_command(body: VoiceCommandRequest):
    """Pré-visualiza o evento interpretado, sem salvar"""
    return interpret(body.transcript, clock=local_now)


@router.post("/voice/events/{user_id}", response_model=CreateVoiceEventResponse)
def create_voice_event(user_id: str, body: VoiceCommandRequest):
    """Interpreta o comando de voz e salva o evento do usuário"""
    result = create_voice_event_uc.execute(ensure_string_id(user_id), body.transcript)
    if result["status"] == "rejected":
        raise HTTPException(status_code=400, detail=result["message"])
    if result["status"] == "error":
        raise HTTPException(status_code=503, detail=result["message"])
    return result


@router.get("/voice/events/{user_id}", response_model=ListVoiceEventsResponse)
def get_voice_events(user_id: str):
    """Lista eventos criados por voz de um usuário"""
    result = list_voice_events_uc.execute(ensure_string_id(user_id))
    if result["status"] == "error":
        raise HTTPException(status_code=503, detail=result.get("message", "Erro ao listar eventos"))
    return result
