"""
Send Event Reminders Use Case
"""
import logging
from datetime import timedelta
from typing import Optional

from app.services.firestore_service import FirestoreService
from app.services.whatsapp_service import WhatsAppService
from app.core.config import REMINDER_HOURS_BEFORE
from app.core.exceptions import FirestoreError
from app.core.utils import local_now, to_local

logger = logging.getLogger(__name__)


class SendEventRemindersUseCase:
    """Use case para enviar lembretes por WhatsApp dos eventos próximos"""
    
    def __init__(self, db=None, whatsapp=None, clock=None):
        self.db = db or FirestoreService()
        self.whatsapp = whatsapp or WhatsAppService()
        self.clock = clock or local_now
    
    def execute(self, hours_before: Optional[int] = None) -> dict:
        """
        Envia lembrete para eventos que acontecem nas próximas `hours_before` horas,
        têm telefone de contato e ainda não foram lembrados.
        
        Returns:
            dict: {"status": "ok" | "error", "sent": int, "skipped": int, "failed": int}
        """
        hours = hours_before or REMINDER_HOURS_BEFORE
        now = self.clock()
        
        try:
            events = self.db.list_pending_reminders(now, now + timedelta(hours=hours))
        except FirestoreError as e:
            logger.error(f"Erro ao buscar lembretes: {e}")
            return {"status": "error", "sent": 0, "skipped": 0, "failed": 0}
        
        logger.info(f"{len(events)} eventos precisam de lembrete")
        sent = skipped = failed = 0
        
        for event in events:
            if not event.get('contact_phone'):
                logger.info(f"Sem telefone para o evento '{event.get('title')}', pulando")
                skipped += 1
                continue
            
            event = dict(event, occurs_at=to_local(event['occurs_at']))
            if self.whatsapp.send_event_reminder(event):
                self.db.mark_reminder_sent(event['id'])
                sent += 1
            else:
                logger.error(f"Falha ao enviar lembrete do evento '{event.get('title')}'")
                failed += 1
        
        return {"status": "ok", "sent": sent, "skipped": skipped, "failed": failed}
