from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from qsvault.api.routes.issues import get_vault_store
from qsvault.config import Settings, get_settings
from qsvault.main import app
from qsvault.vault.memory import MemoryVaultStore
from tests.helpers import HEALTHKIT_DIR, LOCATION_FILE, RecordingNotifier


@pytest.fixture
def store() -> MemoryVaultStore:
    return MemoryVaultStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        healthkit_dir=Path(HEALTHKIT_DIR),
        location_file=Path(LOCATION_FILE),
        github_token="",
        github_repository="",
        authorized_author="",
        api_token="",
    )


@pytest.fixture
def configure_app(store: MemoryVaultStore, settings: Settings) -> Callable[..., None]:
    """Point the app at the memory store; call with overrides to change settings."""

    def _configure(**changes: Any) -> None:
        effective = settings.model_copy(update=changes)
        app.dependency_overrides[get_settings] = lambda: effective

    app.dependency_overrides[get_vault_store] = lambda: store
    _configure()
    return _configure


@pytest.fixture
async def client(configure_app: Callable[..., None]) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
