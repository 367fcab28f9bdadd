from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import requests

from maap.rcs.constants import DEFAULT_FILE_RETENTION_DAYS, TYPING_ACTIVE, TYPING_IDLE
from maap.rcs.errors import (
    BotApiError,
    ConfigurationError,
    UnsupportedContentError,
    UnsupportedSuggestionsError,
)
from maap.rcs.events import EventDispatcher, Handler
from maap.rcs.messages import MessageContent, TextMessage, contact_to_wire
from maap.rcs.request import ApiRequester, Callback
from maap.rcs.suggestions import Suggestions
from maap.webhook import build_webhook_endpoint

if TYPE_CHECKING:
    from maap.config import Settings

logger = logging.getLogger("maap")


class Bot:
    def __init__(
        self,
        token: str | None,
        api_url: str | None,
        bot_id: str | None,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ConfigurationError("token", "Missing token.")
        if not api_url:
            raise ConfigurationError("api_url", "Missing API URL.")
        if not bot_id:
            raise ConfigurationError("bot_id", "Missing bot ID.")

        self._token = token
        self._api_url = api_url
        self._bot_id = bot_id
        self.requester = ApiRequester(token, timeout=timeout, session=session)
        self.dispatcher = EventDispatcher()

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> Bot:
        if settings is None:
            from maap.config import get_settings

            settings = get_settings()
        kwargs.setdefault("timeout", settings.maap_request_timeout)
        return cls(settings.maap_token, settings.maap_api_url, settings.maap_bot_id, **kwargs)

    @property
    def token(self) -> str:
        return self._token

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def bot_id(self) -> str:
        return self._bot_id

    @property
    def base_url(self) -> str:
        return f"{self._api_url.rstrip('/')}/{self._bot_id}"

    # Outbound API

    def send_message(
        self,
        recipient: Any,
        content: str | MessageContent,
        suggestions: Suggestions | None = None,
        callback: Callback | None = None,
    ) -> Any:
        rcs_message: dict[str, Any] = {}

        if isinstance(content, str):
            content = TextMessage(content)
        if not isinstance(content, MessageContent):
            raise UnsupportedContentError(content)
        rcs_message[content.wire_key] = content.to_wire()

        if suggestions is not None:
            if not isinstance(suggestions, Suggestions):
                raise UnsupportedSuggestionsError(suggestions)
            rcs_message["suggestedChipList"] = {"suggestions": suggestions.to_wire()}

        payload = {"RCSMessage": rcs_message, "messageContact": contact_to_wire(recipient)}
        return self._send("POST", "/messages", callback, json=payload)

    def start_typing(self, recipient: Any, callback: Callback | None = None) -> Any:
        return self._send_typing(recipient, TYPING_ACTIVE, callback)

    def stop_typing(self, recipient: Any, callback: Callback | None = None) -> Any:
        return self._send_typing(recipient, TYPING_IDLE, callback)

    def get_message_status(self, message_id: str, callback: Callback | None = None) -> Any:
        return self._send("GET", f"/messages/{message_id}/status", callback)

    def update_message_status(
        self, message_id: str, status: str, callback: Callback | None = None
    ) -> Any:
        payload = {"RCSMessage": {"status": status}}
        return self._send("PUT", f"/messages/{message_id}/status", callback, json=payload)

    def get_contact_capabilities(
        self,
        user_contact: str | None = None,
        chat_id: str | None = None,
        callback: Callback | None = None,
    ) -> Any:
        params: dict[str, str] = {}
        if user_contact:
            params["userContact"] = user_contact
        if chat_id:
            params["chatId"] = chat_id
        return self._send("GET", "/contactCapabilities", callback, params=params)

    def upload_file(
        self,
        path: str | None = None,
        url: str | None = None,
        file_type: str | None = None,
        until: datetime | str | None = None,
        callback: Callback | None = None,
    ) -> Any:
        """Upload a local file (``path``) or register a remote one (``url``).

        ``until`` is the retention deadline; it defaults to 30 days from now.
        """
        if until is None:
            until = datetime.now(timezone.utc) + timedelta(days=DEFAULT_FILE_RETENTION_DAYS)
        form: dict[str, Any] = {
            "fileType": (None, file_type or ""),
            "until": (None, _isoformat(until)),
        }

        if not path:
            form["fileUrl"] = (None, url or "")
            return self._send("POST", "/files", callback, files=form)

        try:
            stream = open(path, "rb")
        except OSError as exc:
            logger.warning("Cannot read upload file %s: %s", path, exc)
            return self.requester.reject(BotApiError(exc), callback)

        with stream:
            form["fileContent"] = stream
            return self._send("POST", "/files", callback, files=form)

    def delete_file(self, file_id: str, callback: Callback | None = None) -> Any:
        return self._send("DELETE", f"/files/{file_id}", callback)

    def get_file(self, file_id: str, callback: Callback | None = None) -> Any:
        return self._send("GET", f"/files/{file_id}", callback)

    # Inbound events

    def on(self, event: str, handler: Handler | None = None) -> Any:
        """Register ``handler`` for ``event``; without a handler, return a decorator."""
        if handler is None:
            return functools.partial(self.dispatcher.on, event)
        return self.dispatcher.on(event, handler)

    def once(self, event: str, handler: Handler) -> Handler:
        return self.dispatcher.once(event, handler)

    def off(self, event: str, handler: Handler) -> None:
        self.dispatcher.off(event, handler)

    def handle_request(self, payload: dict[str, Any]) -> bool:
        event = payload.get("event")
        contact = payload.get("messageContact")
        if contact is not None:
            return self.dispatcher.emit(event, payload, self.reply_to(contact))
        return self.dispatcher.emit(event, payload)

    def handle_webhook(self) -> Callable[..., Any]:
        return build_webhook_endpoint(self)

    def reply_to(self, contact: Any) -> Callable[..., Any]:
        return functools.partial(self.send_message, contact)

    def _send_typing(self, recipient: Any, state: str, callback: Callback | None) -> Any:
        payload = {"RCSMessage": {"isTyping": state}, "messageContact": contact_to_wire(recipient)}
        return self._send("POST", "/messages", callback, json=payload)

    def _send(self, method: str, path: str, callback: Callback | None, **kwargs: Any) -> Any:
        return self.requester.send(method, f"{self.base_url}{path}", callback, **kwargs)


def _isoformat(until: datetime | str) -> str:
    if isinstance(until, str):
        return until
    if until.tzinfo is None:
        until = until.replace(tzinfo=timezone.utc)
    stamp = until.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")
