"""JSON file client holding a single array document."""

import json
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class CorruptStorageError(Exception):
    """Raised when the storage file exists but does not hold a JSON array."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Storage file {path} could not be parsed: {reason}")


class JsonFileClient:
    """Reads and rewrites one JSON array file in full.

    There is no locking: two writers working on the same file will lose
    each other's changes. Only use one client per file at a time.
    """

    def __init__(self, path: Union[str, Path], indent: int = 2):
        """Initialize the client. No I/O happens here.

        Args:
            path: Location of the JSON file.
            indent: Indentation used when writing the file.
        """
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        """Get the storage file path."""
        return self._path

    def exists(self) -> bool:
        """Check whether the storage file is present."""
        return self._path.is_file()

    def read(self) -> list:
        """Parse the whole file.

        Returns:
            The decoded JSON array.

        Raises:
            FileNotFoundError: If the file does not exist.
            CorruptStorageError: If the content is not a JSON array.
        """
        text = self._path.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptStorageError(self._path, str(e)) from e

        if not isinstance(data, list):
            raise CorruptStorageError(
                self._path, f"expected a JSON array, found {type(data).__name__}"
            )
        return data

    def write(self, data: list) -> None:
        """Overwrite the file with the full array.

        Raises:
            OSError: If the file cannot be written.
        """
        payload = json.dumps(data, indent=self._indent, ensure_ascii=False) + "\n"
        self._path.write_text(payload, encoding="utf-8")
        logger.debug(f"Wrote {len(data)} records to {self._path}")
