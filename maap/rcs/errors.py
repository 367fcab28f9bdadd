from __future__ import annotations

from typing import Any


class MaapError(Exception):
    """Base class for every error raised by the SDK."""


class ConfigurationError(MaapError, ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class UnsupportedContentError(MaapError, TypeError):
    def __init__(self, content: Any) -> None:
        super().__init__("Unsupported content type.")
        self.content = content


class UnsupportedSuggestionsError(MaapError, TypeError):
    def __init__(self, suggestions: Any) -> None:
        super().__init__("Unsupported suggestions type.")
        self.suggestions = suggestions


class BotApiError(MaapError):
    """A remote call failed.

    ``error`` carries the failure reason: the ``error`` field of the response
    body when the platform sent one, otherwise the transport exception.
    """

    def __init__(
        self,
        error: Any,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(str(error))
        self.error = error
        self.status_code = status_code
        self.body = body
