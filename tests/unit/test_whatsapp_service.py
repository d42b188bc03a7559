"""
Testes do serviço de WhatsApp (lembretes), sem rede.
"""

from datetime import datetime

import pytest
import requests

from app.services import whatsapp_service
from app.services.whatsapp_service import WhatsAppService, build_reminder_message, format_phone_number


class FakeResponse:
    def __init__(self, status_code=200, text="ok"):
        self.status_code = status_code
        self.text = text


@pytest.mark.parametrize("phone, expected", [
    ("(11) 98765-4321", "5511987654321"),
    ("5511987654321", "5511987654321"),
    ("1133334444", "551133334444"),
    ("1234", None),
    ("", None),
])
def test_format_phone_number(phone, expected):
    assert format_phone_number(phone) == expected


def test_build_reminder_message():
    message = build_reminder_message("Reunião com João", datetime(2026, 10, 20, 14, 0), 90)

    assert "*Reunião com João*" in message
    assert "20/10/2026" in message
    assert "14:00" in message
    assert "90 minutos" in message


def test_send_without_api_key_does_nothing(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("não deveria chamar a API")

    monkeypatch.setattr(whatsapp_service.requests, "post", fail)

    assert WhatsAppService(api_key=None).send_message("11987654321", "oi") is False


def test_send_message_posts_formatted_phone(monkeypatch):
    calls = []

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append((url, headers, json))
        return FakeResponse(200)

    monkeypatch.setattr(whatsapp_service.requests, "post", fake_post)
    service = WhatsAppService(api_url="https://gw.test/api/v1/", api_key="segredo")

    assert service.send_message("(11) 98765-4321", "oi") is True
    url, headers, body = calls[0]
    assert url == "https://gw.test/api/v1/send-message"
    assert headers["Authorization"] == "Bearer segredo"
    assert body == {"phone": "5511987654321", "message": "oi", "isGroup": False}


def test_send_message_http_error(monkeypatch):
    monkeypatch.setattr(whatsapp_service.requests, "post", lambda *a, **k: FakeResponse(500, "erro"))

    assert WhatsAppService(api_key="segredo").send_message("11987654321", "oi") is False


def test_send_message_network_error(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("sem rede")

    monkeypatch.setattr(whatsapp_service.requests, "post", boom)

    assert WhatsAppService(api_key="segredo").send_message("11987654321", "oi") is False


def test_send_event_reminder_without_phone():
    event = {"title": "Reunião", "occurs_at": datetime(2026, 10, 20, 14, 0), "contact_phone": ""}

    assert WhatsAppService(api_key="segredo").send_event_reminder(event) is False
