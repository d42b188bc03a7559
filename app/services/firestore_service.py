"""
Firestore Service - Persistência dos eventos criados por voz
"""
import logging
from datetime import datetime, timedelta
from typing import Any, List
from google.cloud import firestore

from app.services.google_auth import GoogleAuth
from app.core.exceptions import FirestoreError
from app.core.utils import ensure_string_id
from app.models.voice import ResolvedEvent

logger = logging.getLogger(__name__)

EVENTS_COLLECTION = 'voice_command_events'


class FirestoreService:
    """Serviço de persistência no Firestore"""

    def __init__(self):
        self.db = GoogleAuth.get_firestore_client()

    def _require_db(self):
        if not self.db:
            raise FirestoreError("Firestore não disponível")
        return self.db

    def is_message_processed(self, chat_id: Any, message_id: int) -> bool:
        """
        REGRA 3: Anti-Loop - Verifica se mensagem já foi processada.
        Previne criar o mesmo evento duas vezes quando o Telegram reenvia o webhook.
        """
        if not self.db:
            return False

        chat_id_str = ensure_string_id(chat_id)
        doc_ref = (
            self.db.collection('chats')
            .document(chat_id_str)
            .collection('processed_ids')
            .document(str(message_id))
        )

        if doc_ref.get().exists:
            return True

        # Salva imediatamente para prevenir duplicação
        doc_ref.set({'timestamp': datetime.now()})
        return False

    # --- EVENTOS DE VOZ ---
    def save_voice_event(self, user_id: Any, event: ResolvedEvent, reminder_hours_before: int = 24) -> str:
        """
        Salva o evento interpretado e retorna o id do documento.
        Levanta FirestoreError se o banco não estiver disponível.
        """
        db = self._require_db()
        user_id_str = ensure_string_id(user_id)

        data = {
            'user_id': user_id_str,
            'title': event.title,
            'description': event.description,
            'occurs_at': event.occurs_at,
            'duration_minutes': event.duration_minutes,
            'category': event.category.value,
            'contact_phone': event.contact_phone,
            'created_at': datetime.now(),
            'reminder_scheduled_for': event.occurs_at - timedelta(hours=reminder_hours_before),
            'reminder_sent': False,
        }

        try:
            _, ref = db.collection(EVENTS_COLLECTION).add(data)
        except Exception as e:
            logger.error(f"Erro ao salvar evento de voz: {e}", exc_info=True)
            raise FirestoreError(str(e)) from e

        logger.info(f"Evento salvo: {ref.id} (user={user_id_str}, título={event.title})")
        return ref.id

    def list_voice_events(self, user_id: Any) -> List[dict]:
        """Lista os eventos do usuário ordenados pela data"""
        db = self._require_db()
        user_id_str = ensure_string_id(user_id)

        docs = (
            db.collection(EVENTS_COLLECTION)
            .where(filter=firestore.FieldFilter('user_id', '==', user_id_str))
            .order_by('occurs_at')
            .stream()
        )

        events = []
        for doc in docs:
            item = doc.to_dict()
            item['id'] = doc.id
            events.append(item)
        return events

    def list_pending_reminders(self, start: datetime, end: datetime) -> List[dict]:
        """Eventos entre `start` e `end` cujo lembrete ainda não foi enviado"""
        db = self._require_db()

        docs = (
            db.collection(EVENTS_COLLECTION)
            .where(filter=firestore.FieldFilter('reminder_sent', '==', False))
            .where(filter=firestore.FieldFilter('occurs_at', '>', start))
            .where(filter=firestore.FieldFilter('occurs_at', '<=', end))
            .stream()
        )

        events = []
        for doc in docs:
            item = doc.to_dict()
            item['id'] = doc.id
            events.append(item)
        return events

    def mark_reminder_sent(self, event_id: str):
        """Marca o lembrete do evento como enviado"""
        db = self._require_db()
        db.collection(EVENTS_COLLECTION).document(event_id).update({
            'reminder_sent': True,
            'reminder_sent_at': datetime.now()
        })
