"""Tests for settings and logging setup."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from conftest import PEOPLE_URL
from loguru import logger

from gsheety.client import SheetClient
from gsheety.config import Settings
from gsheety.logging import setup_logging


class TestSettings:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.base_url == "https://docs.google.com/spreadsheets/d"
        assert settings.timeout == 60.0
        assert settings.log_level == "WARNING"
        assert settings.json_logs is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GSHEETY_TIMEOUT", "5")
        monkeypatch.setenv("GSHEETY_LOG_LEVEL", "debug")
        monkeypatch.setenv("GSHEETY_BASE_URL", "http://localhost:9000/d")

        settings = Settings(_env_file=None)

        assert settings.timeout == 5.0
        assert settings.log_level == "debug"
        assert settings.base_url == "http://localhost:9000/d"


class TestLogging:
    @pytest.fixture(autouse=True)
    def _reset_logging(self) -> Iterator[None]:
        yield
        logger.remove()
        logger.disable("gsheety")

    @pytest.mark.asyncio
    async def test_setup_logging_enables_library_logs(
        self, client: SheetClient, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging("DEBUG")
        await client.get(PEOPLE_URL, {"sheet": "Broken"})

        err = capsys.readouterr().err
        assert "Querying sheet 'Broken'" in err
        assert "Query returned no table (status=error)" in err

    def test_json_logs(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO", json_logs=True)
        logger.info("hello")

        assert '"message": "hello"' in capsys.readouterr().err
