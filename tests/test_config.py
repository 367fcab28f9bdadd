"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from maap.config import Settings, get_settings
from maap.rcs.client import Bot


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("MAAP_TOKEN", "MAAP_API_URL", "MAAP_BOT_ID", "MAAP_REQUEST_TIMEOUT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.maap_token == ""
        assert settings.maap_request_timeout is None
        assert settings.webhook_path == "/"
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAAP_TOKEN", "env-token")
        monkeypatch.setenv("MAAP_API_URL", "https://api.example.com")
        monkeypatch.setenv("MAAP_BOT_ID", "env-bot")
        monkeypatch.setenv("MAAP_REQUEST_TIMEOUT", "3")

        bot = Bot.from_settings()

        assert bot.token == "env-token"
        assert bot.base_url == "https://api.example.com/env-bot"
        assert bot.requester.timeout == 3.0

    def test_reads_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("MAAP_BOT_ID", raising=False)
        (tmp_path / ".env").write_text("MAAP_BOT_ID=dotenv-bot\n", encoding="utf-8")

        assert get_settings().maap_bot_id == "dotenv-bot"
