import logging
import threading
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

FILE_LOCK = threading.Lock()


class Store(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, text: str) -> None: ...

    def remove(self, key: str) -> None: ...


class FileStore:
    """Key/value text storage with one file per key under ``root``.

    Each call is an independent read or write. There is no transaction
    spanning a read and a later write.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        with FILE_LOCK:
            if not path.exists():
                return None
            try:
                return path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as err:
                logger.warning("Could not read %s: %s", path, err)
                return None

    def set(self, key: str, text: str) -> None:
        path = self._path(key)
        with FILE_LOCK:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")

    def remove(self, key: str) -> None:
        path = self._path(key)
        with FILE_LOCK:
            if path.exists():
                path.unlink()


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, text: str) -> None:
        self._items[key] = text

    def remove(self, key: str) -> None:
        self._items.pop(key, None)
