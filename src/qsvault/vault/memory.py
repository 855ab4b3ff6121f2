from qsvault.vault.base import VaultFileNotFoundError, VaultStore


class MemoryVaultStore(VaultStore):
    """Dict-backed vault used as the injected store in tests."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.reads: list[str] = []
        self.writes: list[str] = []

    async def read(self, path: str) -> str:
        self.reads.append(path)
        if path not in self.files:
            raise VaultFileNotFoundError(path)
        return self.files[path]

    async def write(self, path: str, content: str) -> None:
        self.writes.append(path)
        self.files[path] = content
