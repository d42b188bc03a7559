"""
Core configuration and environment variables
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Environment Variables
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN")
GOOGLE_CALENDAR_ID = os.getenv("GOOGLE_CALENDAR_ID")
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")

# WhatsApp (WhatsGW) para lembretes
WHATSGW_API_URL = os.getenv("WHATSGW_API_URL", "https://app.whatsgw.com.br/api/v1")
WHATSGW_API_KEY = os.getenv("WHATSGW_API_KEY")

# Agenda
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "America/Sao_Paulo")
REMINDER_HOURS_BEFORE = int(os.getenv("REMINDER_HOURS_BEFORE", "24"))
SYNC_GOOGLE_CALENDAR = os.getenv("SYNC_GOOGLE_CALENDAR", "false").lower() in ("1", "true", "sim", "yes")
