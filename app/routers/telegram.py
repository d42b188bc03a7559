"""
Telegram Router - Webhook endpoint (comandos de voz e texto)
"""
import os
import logging
from datetime import datetime
from fastapi import APIRouter, Request

from app.services.firestore_service import FirestoreService
from app.services.gemini_service import GeminiService
from app.services.telegram_service import TelegramService
from app.use_cases.create_voice_event import CreateVoiceEventUseCase
from app.core.utils import ensure_string_id, format_datetime_br, to_local

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/telegram", tags=["telegram"])

# Instâncias dos serviços e use cases
db = FirestoreService()
ai = GeminiService()
telegram = TelegramService()
create_voice_event_uc = CreateVoiceEventUseCase(db=db)

CATEGORY_LABELS = {
    "meeting": "Reunião",
    "deadline": "Prazo",
    "task": "Tarefa",
    "other": "Evento",
}

HELP_TEXT = (
    "🎙️ **Comandos de voz**\n\n"
    "Mande um áudio ou texto descrevendo o evento. Exemplos:\n"
    "• Agendar uma reunião com a equipe de design amanhã às 14h com duração de 1 hora\n"
    "• Prazo para o projeto X na próxima segunda\n"
    "• Tarefa de revisão do portfólio hoje à tarde\n"
    "• Reunião com João na quinta às 9h, telefone 11987654321\n\n"
    "Reconheço: tipo (reunião, prazo, tarefa), data (hoje, amanhã, dias da "
    "semana, 05/12, 15 de dezembro), horário, duração e telefone."
)


def event_datetime(value) -> datetime:
    """Aceita datetime ou string ISO (evento serializado em JSON)"""
    return value if isinstance(value, datetime) else datetime.fromisoformat(value)


def format_confirmation(result: dict) -> str:
    """Mensagem de confirmação do evento criado"""
    event = result["event"]
    occurs_at = to_local(event_datetime(event["occurs_at"]))
    text = (
        f"✅ Evento agendado!\n\n"
        f"📌 {CATEGORY_LABELS.get(event['category'], 'Evento')}: {event['title']}\n"
        f"🕐 {format_datetime_br(occurs_at)}\n"
        f"⏱️ {event['duration_minutes']} min"
    )
    if event.get("contact_phone"):
        text += f"\n📞 {event['contact_phone']}"
    return text


def transcribe_voice(file_id: str) -> str:
    """Baixa a nota de voz e devolve a transcrição (ou "")"""
    path = telegram.download_voice(file_id)
    if not path:
        return ""
    try:
        return ai.transcribe_audio(path)
    finally:
        try:
            os.remove(path)
        except OSError as e:
            logger.warning(f"Não consegui remover o áudio temporário {path}: {e}")


@router.post("/webhook")
async def webhook(request: Request):
    """Endpoint principal do webhook do Telegram"""
    try:
        data = await request.json()
    except ValueError:
        logger.warning("Webhook com corpo inválido")
        return {"status": "invalid"}

    if "message" not in data:
        return {"status": "ok"}

    msg = data["message"]

    # REGRA 1: Chat ID sempre string
    chat_id = ensure_string_id(msg["chat"]["id"])
    msg_id = msg.get("message_id")
    text = (msg.get("text") or "").strip()

    if text in ("/start", "/ajuda", "/help"):
        telegram.send_message(chat_id, HELP_TEXT)
        return {"status": "help"}

    # REGRA 3: Anti-Loop - Verifica se mensagem já foi processada
    if msg_id and db.is_message_processed(chat_id, msg_id):
        logger.info(f"Mensagem {msg_id} já processada, ignorando...")
        return {"status": "ignored"}

    transcript = text
    if not transcript and "voice" in msg:
        telegram.send_message(chat_id, "🎧...")
        transcript = transcribe_voice(msg["voice"]["file_id"])

    if not transcript:
        telegram.send_message(chat_id, "🤔 Não entendi o áudio. Tente de novo ou mande /ajuda.")
        return {"status": "empty"}

    result = create_voice_event_uc.execute(chat_id, transcript)

    if result["status"] == "created":
        telegram.send_message(chat_id, format_confirmation(result))
    elif result["status"] == "rejected":
        telegram.send_message(chat_id, "🤔 Não recebi nenhum comando. Mande /ajuda para ver exemplos.")
    else:
        telegram.send_message(chat_id, "❌ Erro ao salvar o evento. Tente em instantes.")

    return {"status": result["status"]}
