"""
Agenda por Voz - API principal
"""
import logging
from fastapi import FastAPI

from app.routers import web_api, telegram, cron

# --- CONFIGURAÇÕES ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Agenda por Voz", version="1.0.0")

app.include_router(web_api.router)
app.include_router(telegram.router)
app.include_router(cron.router)


@app.get("/")
def home():
    return {"status": "Agenda por Voz Online"}
