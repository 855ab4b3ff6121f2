from qsvault.vault.base import (
    VaultError,
    VaultFileNotFoundError,
    VaultReader,
    VaultStore,
    VaultWriter,
)
from qsvault.vault.local import LocalVaultStore
from qsvault.vault.memory import MemoryVaultStore

__all__ = [
    "LocalVaultStore",
    "MemoryVaultStore",
    "VaultError",
    "VaultFileNotFoundError",
    "VaultReader",
    "VaultStore",
    "VaultWriter",
]
