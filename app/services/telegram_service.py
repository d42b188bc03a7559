"""
Telegram Service
"""
import requests
import logging
import tempfile
from typing import Any, Optional

from app.core.config import TELEGRAM_TOKEN
from app.core.utils import ensure_string_id

logger = logging.getLogger(__name__)

API_BASE = "https://api.telegram.org"


class TelegramService:
    """Envio de respostas e download de notas de voz do Telegram"""
    
    def __init__(self, token: Optional[str] = TELEGRAM_TOKEN):
        self.token = token
        self.base_url = f"{API_BASE}/bot{self.token}" if self.token else None
    
    def send_message(self, chat_id: Any, text: str) -> bool:
        """Envia mensagem via Telegram"""
        if not self.base_url:
            logger.warning("TELEGRAM_TOKEN não configurado, mensagem descartada")
            return False
        
        try:
            response = requests.post(
                f"{self.base_url}/sendMessage",
                json={"chat_id": ensure_string_id(chat_id), "text": text},
                timeout=5
            )
            return response.status_code == 200
        except requests.RequestException as e:
            logger.error(f"Erro ao enviar mensagem: {e}")
            return False
    
    def download_voice(self, file_id: str) -> Optional[str]:
        """Baixa a nota de voz e retorna o caminho do arquivo .ogg temporário"""
        if not self.base_url:
            return None
        
        try:
            response = requests.get(
                f"{self.base_url}/getFile",
                params={"file_id": file_id},
                timeout=5
            )
            file_path = response.json().get("result", {}).get("file_path")
            
            if not file_path:
                logger.warning(f"Telegram não retornou file_path para {file_id}")
                return None
            
            content = requests.get(
                f"{API_BASE}/file/bot{self.token}/{file_path}",
                timeout=10
            ).content
            
            with tempfile.NamedTemporaryFile(suffix=".ogg", delete=False) as f:
                f.write(content)
                return f.name
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Erro ao baixar áudio: {e}")
            return None
