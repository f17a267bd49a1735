"""Shared test fixtures for gsheety."""

from __future__ import annotations

from pathlib import Path

import pytest

from gsheety.client import SheetClient
from gsheety.config import Settings
from gsheety.transport import LocalFileTransport, Transport, TransportResponse

GOLDEN_DIR = Path(__file__).parent / "golden"

PEOPLE_URL = "https://docs.google.com/spreadsheets/d/people/edit#gid=0"


def envelope(body: str) -> str:
    """Wrap a JSON body the way the query endpoint does."""
    return f"/*O_o*/\ngoogle.visualization.Query.setResponse({body});"


class MockTransport(Transport):
    """Transport returning canned responses and recording requested URLs."""

    def __init__(self, *responses: TransportResponse) -> None:
        self._responses = list(responses)
        self.requests: list[str] = []
        self.closed = False

    @classmethod
    def text(cls, body: str, status_code: int = 200, reason: str = "OK") -> MockTransport:
        return cls(TransportResponse(status_code, reason, body.encode("utf-8")))

    async def get(self, url: str) -> TransportResponse:
        self.requests.append(url)
        return self._responses.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def local_transport(golden_dir: Path) -> LocalFileTransport:
    """Create a transport that reads from golden files."""
    return LocalFileTransport(golden_dir)


@pytest.fixture
def client(local_transport: LocalFileTransport, settings: Settings) -> SheetClient:
    """Create a SheetClient with local file transport."""
    return SheetClient(local_transport, settings=settings)
