import logging
from typing import Any

from fastapi import FastAPI

from maap.config import get_settings
from maap.rcs.client import Bot
from maap.rcs.errors import BotApiError
from maap.rcs.event_types import EVENT_MESSAGE
from maap.webhook import create_router

settings = get_settings()

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("maap")

bot = Bot.from_settings(settings)


@bot.on(EVENT_MESSAGE)
def echo(payload: dict[str, Any], reply=None) -> None:
    message = payload.get("RCSMessage")
    text = str(message.get("textMessage", "") or "") if isinstance(message, dict) else ""
    if not text or reply is None:
        return

    def on_sent(err: BotApiError | None, body: Any) -> None:
        if err is not None:
            logger.error("Echo reply failed: %s", err)
            return
        logger.info("Echo reply sent: %s", body)

    reply(f"You wrote: {text}", None, on_sent)


app = FastAPI(title="MaaP Echo Bot", version="0.1.0")
app.include_router(create_router(bot, settings.webhook_path))


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}
