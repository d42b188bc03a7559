"""
Create Voice Event Use Case
"""
import logging
from typing import Callable, Optional
from datetime import datetime

from app.services.firestore_service import FirestoreService
from app.services.calendar_service import CalendarService
from app.core.config import REMINDER_HOURS_BEFORE, SYNC_GOOGLE_CALENDAR
from app.core.exceptions import FirestoreError
from app.core.utils import ensure_string_id, local_now
from app.voice.interpreter import interpret

logger = logging.getLogger(__name__)


class CreateVoiceEventUseCase:
    """Use case para criar evento a partir de um comando de voz"""
    
    def __init__(self, db=None, calendar=None, clock: Optional[Callable[[], datetime]] = None,
                 sync_calendar: bool = SYNC_GOOGLE_CALENDAR):
        self.db = db or FirestoreService()
        self.calendar = calendar
        self.sync_calendar = sync_calendar
        self.clock = clock or local_now
        if self.sync_calendar and self.calendar is None:
            self.calendar = CalendarService()
    
    def execute(self, user_id: str, transcript: str) -> dict:
        """
        Interpreta e salva o evento
        
        Returns:
            dict: {"status": "created" | "rejected" | "error", "event": {...}, "id": ...}
        """
        user_id_str = ensure_string_id(user_id)
        event = interpret(transcript, clock=self.clock)
        payload = event.model_dump(mode="json")
        
        if not event.success:
            return {"status": "rejected", "event": payload, "message": "Comando de voz vazio"}
        
        try:
            event_id = self.db.save_voice_event(user_id_str, event, REMINDER_HOURS_BEFORE)
        except FirestoreError as e:
            logger.error(f"Não foi possível salvar o evento de {user_id_str}: {e}")
            return {"status": "error", "event": payload, "message": "Erro ao salvar evento"}
        
        synced = False
        if self.sync_calendar and self.calendar:
            synced = self.calendar.create_from_voice(event)
        
        return {"status": "created", "id": event_id, "event": payload, "calendar_synced": synced}
