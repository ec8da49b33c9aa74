"""Client modules for storage backends."""

from product_manager.clients.json_file_client import CorruptStorageError, JsonFileClient

__all__ = [
    "CorruptStorageError",
    "JsonFileClient",
]
