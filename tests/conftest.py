"""
Fixtures compartilhadas: relógio fixo e fakes dos serviços externos.

O relógio fixo é uma segunda-feira (19/10/2026 às 10:30), o que deixa as
contas de "amanhã", dias da semana e "dia N" reproduzíveis.
"""

from datetime import datetime

import pytest

from app.core.exceptions import FirestoreError


FIXED_NOW = datetime(2026, 10, 19, 10, 30)


class FakeFirestore:
    """Substitui o FirestoreService guardando tudo em memória"""

    def __init__(self, events=None, fail=False):
        self.saved = []
        self.events = events or []
        self.reminded = []
        self.windows = []
        self.fail = fail

    def save_voice_event(self, user_id, event, reminder_hours_before=24):
        if self.fail:
            raise FirestoreError("Firestore não disponível")
        self.saved.append((user_id, event, reminder_hours_before))
        return f"evt-{len(self.saved)}"

    def list_voice_events(self, user_id):
        if self.fail:
            raise FirestoreError("Firestore não disponível")
        return [e for e in self.events if e.get("user_id") == user_id]

    def list_pending_reminders(self, start, end):
        if self.fail:
            raise FirestoreError("Firestore não disponível")
        self.windows.append((start, end))
        return list(self.events)

    def mark_reminder_sent(self, event_id):
        self.reminded.append(event_id)

    def is_message_processed(self, chat_id, message_id):
        return False


class FakeCalendar:
    def __init__(self, ok=True):
        self.ok = ok
        self.created = []

    def create_from_voice(self, event):
        self.created.append(event)
        return self.ok


class FakeWhatsApp:
    def __init__(self, ok=True):
        self.ok = ok
        self.sent = []

    def send_event_reminder(self, event):
        self.sent.append(event)
        return self.ok


@pytest.fixture
def clock():
    """Relógio injetável que sempre devolve FIXED_NOW"""
    return lambda: FIXED_NOW


@pytest.fixture
def fake_db():
    return FakeFirestore()
