"""
Google Gemini AI Service - transcrição de áudio
"""
import logging
import google.generativeai as genai

from app.core.config import GEMINI_API_KEY

logger = logging.getLogger(__name__)

if GEMINI_API_KEY:
    genai.configure(api_key=GEMINI_API_KEY)

TRANSCRIBE_PROMPT = (
    "Transcreva este áudio em português do Brasil, exatamente como foi falado. "
    "Responda apenas com o texto transcrito, sem comentários."
)


class GeminiService:
    """Serviço de integração com Google Gemini AI"""
    
    def __init__(self):
        self.model = genai.GenerativeModel('gemini-2.0-flash') if GEMINI_API_KEY else None
    
    def transcribe_audio(self, audio_file_path: str, mime_type: str = "audio/ogg") -> str:
        """
        Transcreve áudio usando Gemini.
        Contrato: devolve um único texto final, ou "" se não houve fala.
        """
        if not self.model:
            logger.warning("Gemini não configurado, sem transcrição")
            return ""
        
        try:
            audio_file = genai.upload_file(audio_file_path, mime_type=mime_type)
            response = self.model.generate_content([TRANSCRIBE_PROMPT, audio_file])
            return (response.text or "").strip()
        except Exception as e:
            logger.error(f"Erro ao transcrever áudio: {e}")
            return ""
