"""
Key-value record storage.

Maps a string key to a JSON-serializable value. Values are serialized with
json on write and deserialized on read, so whatever is written comes back
equal on the next read (subject to float precision).

This is a single-process, single-writer store: no locking, no expiry,
no retries. Every write replaces the whole value for its key. Any I/O or
decode failure is raised as StorageError with the original exception
chained.

Keys used by the engine:
    {company_id}.employees   -> list of employees
    {employee_id}.benefits   -> benefits election
    {employee_id}.payroll    -> payroll snapshot
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote, unquote

from .errors import StorageError

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


def _dumps(key: str, value: Any) -> str:
    try:
        return json.dumps(value, indent=2)
    except (TypeError, ValueError) as e:
        raise StorageError(key, f"value is not JSON-serializable: {e}") from e


def _loads(key: str, text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise StorageError(key, f"stored value is not valid JSON: {e}") from e


class RecordStore:
    """Base class for record stores.

    Subclasses implement _read_text/_write_text/_remove/keys; the base
    class handles serialization and get-or-initialize.
    """

    def get(self, key: str) -> Optional[Any]:
        """Read a value.

        Returns:
            Deserialized value, or None if the key was never written
        """
        text = self._read_text(key)
        if text is None:
            return None
        return _loads(key, text)

    def put(self, key: str, value: Any) -> None:
        """Write a value, replacing whatever was stored for key."""
        self._write_text(key, _dumps(key, value))
        logger.debug(f"put {key}")

    def get_or_initialize(self, key: str, default_factory: Callable[[], Any]) -> Any:
        """Read a value, provisioning it with a default if absent.

        The first read of a never-written key persists the default, so
        the key is never absent afterwards.
        """
        value = self.get(key)
        if value is not None:
            return value

        value = default_factory()
        self.put(key, value)
        logger.debug(f"provisioned {key} with default")
        return value

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key existed
        """
        removed = self._remove(key)
        if removed:
            logger.debug(f"deleted {key}")
        return removed

    def keys(self) -> List[str]:
        raise NotImplementedError

    def _read_text(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write_text(self, key: str, text: str) -> None:
        raise NotImplementedError

    def _remove(self, key: str) -> bool:
        raise NotImplementedError


class MemoryStore(RecordStore):
    """In-process store. Keeps serialized text so reads never alias writes."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def keys(self) -> List[str]:
        return sorted(self._data)

    def _read_text(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write_text(self, key: str, text: str) -> None:
        self._data[key] = text

    def _remove(self, key: str) -> bool:
        return self._data.pop(key, None) is not None


class JsonFileStore(RecordStore):
    """File-backed store: one <key>.json file per key under a root directory.

    Keys are percent-encoded into file names, so any id a caller supplies
    (slashes, a leading dot, an empty employee id) maps to exactly one
    file inside root. A leading "." is encoded as well, which keeps record
    files apart from the hidden temp files used during writes.

    Writes go to a temp file in the same directory and are moved into
    place with os.replace, so a reader sees either the old document or
    the new one.
    """

    SUFFIX = ".json"
    TEMP_PREFIX = ".tmp-"

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    @staticmethod
    def encode_key(key: str) -> str:
        """Map a key to a file stem that cannot leave root or start with '.'."""
        stem = quote(key, safe="")
        if stem.startswith("."):
            stem = "%2E" + stem[1:]
        return stem

    @staticmethod
    def decode_key(stem: str) -> str:
        return unquote(stem)

    def _path(self, key: str) -> Path:
        if not key:
            raise StorageError(key, "empty key")
        return self.root / f"{self.encode_key(key)}{self.SUFFIX}"

    def keys(self) -> List[str]:
        if not self.root.exists():
            return []
        return sorted(
            self.decode_key(p.name[: -len(self.SUFFIX)])
            for p in self.root.glob(f"*{self.SUFFIX}")
            if not p.name.startswith(".")
        )

    def _read_text(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise StorageError(key, f"stored value is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(key, f"read failed: {e}") from e

    def _write_text(self, key: str, text: str) -> None:
        path = self._path(key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=self.TEMP_PREFIX, suffix=self.SUFFIX)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(key, f"write failed: {e}") from e

    def _remove(self, key: str) -> bool:
        path = self._path(key)
        try:
            path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(key, f"delete failed: {e}") from e
