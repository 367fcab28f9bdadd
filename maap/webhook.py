from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from maap.models import WebhookEnvelope

if TYPE_CHECKING:
    from maap.rcs.client import Bot

logger = logging.getLogger("maap")

Endpoint = Callable[[Request], Awaitable[Response]]


def build_webhook_endpoint(bot: Bot) -> Endpoint:
    """Build the inbound endpoint for ``bot``.

    The platform always gets ``200 {"status":"ok"}`` for POSTs, whether or
    not the body parsed and whether or not a handler failed.
    """

    async def webhook(request: Request) -> Response:
        if request.method != "POST":
            return Response(status_code=200, media_type="application/json")

        body = await request.body()
        try:
            payload = json.loads(body)
            envelope = WebhookEnvelope.model_validate(payload)
        except ValueError:
            logger.exception("Failed to parse webhook body")
            return JSONResponse(status_code=200, content={"status": "ok"})

        if envelope.has_event():
            try:
                await asyncio.to_thread(bot.handle_request, payload)
            except Exception:
                logger.exception("Handler failed for event=%s", envelope.event)
        else:
            logger.info("Webhook payload without event ignored")

        return JSONResponse(status_code=200, content={"status": "ok"})

    return webhook


def create_router(bot: Bot, path: str = "/") -> APIRouter:
    """Mount the webhook on ``path`` for every HTTP method.

    Only ``path`` is served; other paths fall through to the app (404 by
    default). Mount the router under a catch-all path to answer everywhere.
    """
    router = APIRouter()
    # methods=None matches every verb, HEAD and TRACE included.
    router.add_route(path, bot.handle_webhook(), methods=None, include_in_schema=False)
    return router


def create_app(bot: Bot, path: str = "/", title: str = "MaaP RCS Bot") -> FastAPI:
    app = FastAPI(title=title)
    app.include_router(create_router(bot, path))
    return app
