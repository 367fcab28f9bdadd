"""Shared fixtures: a Bot wired to a mocked requests session."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from maap.rcs.client import Bot

API_URL = "https://api.example.com/bot/v1"
BOT_ID = "bot-123"
BASE_URL = f"{API_URL}/{BOT_ID}"


def build_response(status_code: int = 200, body: Any = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def session() -> MagicMock:
    mock = MagicMock(spec=requests.Session)
    mock.request.return_value = build_response(200, {"messageId": "m-1"})
    return mock


@pytest.fixture
def bot(session: MagicMock) -> Bot:
    return Bot("secret-token", API_URL, BOT_ID, session=session)
