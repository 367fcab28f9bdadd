from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import requests

from maap.rcs.errors import BotApiError

logger = logging.getLogger("maap")

Callback = Callable[[BotApiError | None, Any], None]


class ApiRequester:
    """Issues authenticated calls against the bot API.

    Every call either returns the decoded body / raises ``BotApiError``, or,
    when a callback is given, hands the outcome to the callback exactly once
    and returns ``None``.
    """

    def __init__(
        self,
        token: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        callback: Callback | None = None,
        **kwargs: Any,
    ) -> Any:
        try:
            body = self._request(method, url, **kwargs)
        except BotApiError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return self.reject(exc, callback)

        if callback is None:
            return body
        callback(None, body)
        return None

    @staticmethod
    def reject(error: BotApiError, callback: Callback | None = None) -> None:
        """Raise ``error``, or hand it to ``callback`` when one is given."""
        if callback is None:
            raise error
        callback(error, None)
        return None

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        headers = {"Authorization": f"Bearer {self._token}"}
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            body = self._decode(exc.response) if exc.response is not None else None
            reason = body.get("error") if isinstance(body, dict) and body.get("error") else exc
            raise BotApiError(reason, status_code=status_code, body=body) from exc
        except requests.RequestException as exc:
            raise BotApiError(exc) from exc

        body = self._decode(response)
        if isinstance(body, dict) and body.get("error"):
            raise BotApiError(body["error"], status_code=response.status_code, body=body)
        return body

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text
