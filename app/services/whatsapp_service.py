"""
WhatsApp Service (WhatsGW) - lembretes de eventos
"""
import logging
from datetime import datetime
from typing import Optional

import requests

from app.core.config import WHATSGW_API_URL, WHATSGW_API_KEY
from app.core.utils import only_digits

logger = logging.getLogger(__name__)

COUNTRY_CODE = "55"

REMINDER_TEMPLATE = (
    "🗓️ *Lembrete de Compromisso*\n\n"
    "Olá! Este é um lembrete para o seu compromisso:\n\n"
    "*{title}*\n"
    "📅 Data: {date}\n"
    "⏰ Horário: {time}\n"
    "⏱️ Duração: {duration} minutos\n\n"
    "Para remarcar ou cancelar, entre em contato conosco."
)


def format_phone_number(phone: str) -> Optional[str]:
    """
    Formata o número para a API (só dígitos, com 55).
    Exemplos:
    "(11) 98765-4321" -> "5511987654321"
    "5511987654321" -> "5511987654321"
    "1234" -> None
    """
    digits = only_digits(phone)
    if len(digits) < 8:
        return None
    if len(digits) <= 11:
        return COUNTRY_CODE + digits
    return digits


def build_reminder_message(title: str, occurs_at: datetime, duration_minutes: int) -> str:
    """Texto do lembrete no padrão brasileiro"""
    return REMINDER_TEMPLATE.format(
        title=title,
        date=occurs_at.strftime('%d/%m/%Y'),
        time=occurs_at.strftime('%H:%M'),
        duration=duration_minutes
    )


class WhatsAppService:
    """Serviço de envio de mensagens pelo gateway WhatsGW"""
    
    def __init__(self, api_url: str = WHATSGW_API_URL, api_key: Optional[str] = WHATSGW_API_KEY):
        self.api_url = api_url.rstrip('/')
        self.api_key = api_key
    
    def send_message(self, phone: str, message: str, is_group: bool = False) -> bool:
        """Envia mensagem; nunca levanta exceção, retorna sucesso"""
        if not self.api_key:
            logger.warning("WHATSGW_API_KEY não configurada, lembrete não enviado")
            return False
        
        formatted = format_phone_number(phone)
        if not formatted:
            logger.error(f"Telefone inválido para WhatsApp: {phone}")
            return False
        
        try:
            response = requests.post(
                f"{self.api_url}/send-message",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={"phone": formatted, "message": message, "isGroup": is_group},
                timeout=10
            )
        except requests.RequestException as e:
            logger.error(f"Erro ao enviar WhatsApp: {e}")
            return False
        
        if response.status_code >= 400:
            logger.error(f"WhatsGW respondeu {response.status_code}: {response.text[:200]}")
            return False
        
        logger.info(f"WhatsApp enviado para {formatted}")
        return True
    
    def send_event_reminder(self, event: dict) -> bool:
        """Envia o lembrete de um evento salvo (dict do Firestore)"""
        phone = event.get('contact_phone', '')
        if not phone:
            return False
        
        message = build_reminder_message(
            event.get('title', 'Compromisso'),
            event['occurs_at'],
            event.get('duration_minutes', 60)
        )
        return self.send_message(phone, message)
