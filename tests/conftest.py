import json
import sys
from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.config import AppConfig
from app.contact import LoggingNotifier


class RecordingNotifier(LoggingNotifier):
    """Logs like the real notifier and keeps what it was asked to send."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    async def notify(self, recipient: str, subject: str, body: str) -> None:
        await super().notify(recipient, subject, body)
        self.sent.append((recipient, subject, body))


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    data_dir = tmp_path / "_data"
    return AppConfig(
        debug=True,
        submissions_dir=data_dir / "submissions",
        settings_path=data_dir / "contact.json",
        transport="simulated",
    )


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def write_settings(config: AppConfig):
    def _write(**form_settings) -> Path:
        config.settings_path.parent.mkdir(parents=True, exist_ok=True)
        config.settings_path.write_text(json.dumps({"form_settings": form_settings}))
        return config.settings_path
    return _write


@pytest.fixture()
def app(config: AppConfig, notifier: RecordingNotifier):
    from app.main import create_app
    return create_app(config, notifier)


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
