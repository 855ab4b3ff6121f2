"""Local filesystem vault backend."""

import asyncio
import logging
from pathlib import Path

from qsvault.vault.base import VaultFileNotFoundError, VaultStore

logger = logging.getLogger(__name__)


class LocalVaultStore(VaultStore):
    """Reads and writes vault files on disk, off the event loop."""

    async def read(self, path: str) -> str:
        file_path = Path(path)
        if not await asyncio.to_thread(file_path.is_file):
            raise VaultFileNotFoundError(path)
        return await asyncio.to_thread(file_path.read_text, encoding="utf-8")

    async def write(self, path: str, content: str) -> None:
        await asyncio.to_thread(self._write_sync, Path(path), content)
        logger.debug("Wrote %d bytes to %s", len(content), path)

    @staticmethod
    def _write_sync(file_path: Path, content: str) -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
