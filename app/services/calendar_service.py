"""
Google Calendar Service
"""
import logging
from googleapiclient.discovery import build

from app.services.google_auth import GoogleAuth
from app.core.config import GOOGLE_CALENDAR_ID, APP_TIMEZONE
from app.models.voice import ResolvedEvent

logger = logging.getLogger(__name__)

# Fuso de Brasília, usado quando o datetime vem sem offset
DEFAULT_OFFSET = '-03:00'


def with_offset(iso: str) -> str:
    """Garante timezone no final da string ISO"""
    iso = iso.replace('Z', '+00:00')
    if '+' not in iso and '-' not in iso[-6:]:
        iso += DEFAULT_OFFSET
    return iso


class CalendarService:
    """Serviço de integração com Google Calendar"""
    
    def __init__(self):
        creds = GoogleAuth.get_credentials()
        self.service = build('calendar', 'v3', credentials=creds) if creds else None
        self.calendar_id = GOOGLE_CALENDAR_ID
    
    def create_event(self, title: str, start_iso: str, end_iso: str, description: str = "") -> bool:
        """Cria evento no calendário"""
        if not self.service:
            logger.error("Calendar service não disponível")
            return False
        
        if not self.calendar_id:
            logger.error("GOOGLE_CALENDAR_ID não configurado")
            return False
        
        body = {
            'summary': title,
            'description': description or "",
            'start': {'dateTime': with_offset(start_iso), 'timeZone': APP_TIMEZONE},
            'end': {'dateTime': with_offset(end_iso), 'timeZone': APP_TIMEZONE}
        }
        
        try:
            logger.info(f"Criando evento: {title} em {body['start']['dateTime']}")
            result = self.service.events().insert(calendarId=self.calendar_id, body=body).execute()
            logger.info(f"Evento criado com sucesso: {result.get('id')}")
            return True
        except Exception as e:
            logger.error(f"Erro ao criar evento: {e}", exc_info=True)
            return False
    
    def create_from_voice(self, event: ResolvedEvent) -> bool:
        """Publica no Google Calendar um evento interpretado de comando de voz"""
        return self.create_event(
            event.title,
            event.occurs_at.isoformat(),
            event.ends_at.isoformat(),
            event.description
        )
