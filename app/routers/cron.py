"""
Cron Jobs Router
"""
import logging
from typing import Optional
from fastapi import APIRouter

from app.use_cases.send_event_reminders import SendEventRemindersUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cron", tags=["cron"])

send_reminders_uc = SendEventRemindersUseCase()


@router.get("/lembretes")
def cron_lembretes(hours_before: Optional[int] = None):
    """
    Cron job de lembretes.
    Busca eventos das próximas horas com telefone de contato e envia
    o lembrete por WhatsApp.
    """
    result = send_reminders_uc.execute(hours_before)
    logger.info(f"Lembretes: {result}")
    return result
