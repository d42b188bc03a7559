"""
List Voice Events Use Case
"""
from app.services.firestore_service import FirestoreService
from app.core.exceptions import FirestoreError
from app.core.utils import ensure_string_id


class ListVoiceEventsUseCase:
    """Use case para listar eventos criados por voz"""
    
    def __init__(self, db=None):
        self.db = db or FirestoreService()
    
    def execute(self, user_id: str) -> dict:
        """
        Lista eventos do usuário
        
        Returns:
            dict: {"status": "ok" | "error", "events": List[Dict], "count": int}
        """
        try:
            events = self.db.list_voice_events(ensure_string_id(user_id))
        except FirestoreError as e:
            return {"status": "error", "events": [], "count": 0, "message": str(e)}
        
        return {
            "status": "ok",
            "events": events,
            "count": len(events)
        }
