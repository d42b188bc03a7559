"""
Google Authentication Service (Singleton)
"""
import os
import json
import logging
from typing import Optional
from google.oauth2 import service_account
from google.cloud import firestore

from app.core.config import FIREBASE_CREDENTIALS

logger = logging.getLogger(__name__)

KEY_FILE = "firebase-key.json"


class GoogleAuth:
    """Credenciais únicas para Calendar e Firestore (agenda de comandos de voz)"""
    
    SCOPES = [
        'https://www.googleapis.com/auth/calendar',
        'https://www.googleapis.com/auth/datastore'
    ]
    
    _credentials = None
    _firestore_client = None
    
    @classmethod
    def is_configured(cls) -> bool:
        """Há alguma fonte de credencial disponível?"""
        return bool(FIREBASE_CREDENTIALS) or os.path.exists(KEY_FILE)
    
    @classmethod
    def get_credentials(cls) -> Optional[service_account.Credentials]:
        """Retorna credenciais do Google (singleton), ou None sem configuração"""
        if cls._credentials or not cls.is_configured():
            return cls._credentials
        
        try:
            if FIREBASE_CREDENTIALS:
                cls._credentials = service_account.Credentials.from_service_account_info(
                    json.loads(FIREBASE_CREDENTIALS), scopes=cls.SCOPES
                )
            else:
                cls._credentials = service_account.Credentials.from_service_account_file(
                    KEY_FILE, scopes=cls.SCOPES
                )
        except Exception as e:
            logger.error(f"❌ Erro na autenticação Google: {e}")
        return cls._credentials
    
    @classmethod
    def get_firestore_client(cls) -> Optional[firestore.Client]:
        """Retorna cliente Firestore (singleton)"""
        if cls._firestore_client:
            return cls._firestore_client
        
        creds = cls.get_credentials()
        if creds:
            cls._firestore_client = firestore.Client(credentials=creds, project=creds.project_id)
        else:
            logger.warning("Firestore sem credenciais, persistência desativada")
        
        return cls._firestore_client
