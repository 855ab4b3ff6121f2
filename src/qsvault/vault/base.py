from abc import ABC, abstractmethod


class VaultError(Exception):
    """Base error raised by vault backends."""


class VaultFileNotFoundError(VaultError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class VaultReader(ABC):
    """Read capability handed to the ingestion pipelines.

    The pipelines never touch storage directly, so any backend (local disk,
    in-memory, blob store) can be substituted.
    """

    @abstractmethod
    async def read(self, path: str) -> str:
        """Return the full text stored at `path`.

        Raises:
            VaultFileNotFoundError: If nothing is stored at `path`.
        """
        ...


class VaultWriter(ABC):
    """Write capability handed to the ingestion pipelines."""

    @abstractmethod
    async def write(self, path: str, content: str) -> None:
        """Replace whatever is stored at `path` with `content`."""
        ...


class VaultStore(VaultReader, VaultWriter):
    """A backend providing both capabilities."""
