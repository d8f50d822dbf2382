from pathlib import Path
import json
import logging
import os
import stat
import tempfile
import threading
from typing import Any, Callable, Dict, List, Optional

from ..errors import (
    CollectionNotFound,
    CollectionParseError,
    InvalidCollectionName,
    StorageError,
    StoreNotConnected,
)

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _file_mode(path: Path) -> int:
    """Mode for a rewritten collection file: the existing one, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class Store:
    """JSON-on-disk collections: one ``<collection>.json`` array per collection.

    The store owns the base directory and whole-file reads/writes. It keeps a
    list of handlers to run once the directory is established, which lets
    collection handles be declared before the data directory is known.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir: Optional[Path] = None
        self.connected = False
        self._on_connect: List[Callable[[], None]] = []
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()
        if base_dir is not None:
            self.set_base_dir(base_dir)

    def set_base_dir(self, base_dir: Path):
        path = Path(base_dir)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(e.errno, e.strerror, str(path)) from e
        self.base_dir = path

    def on_connect(self, handler: Callable[[], None]):
        if self.connected:
            handler()
            return
        self._on_connect.append(handler)

    def connect(self):
        """Run pending handlers once, in the order they were registered."""
        if self.base_dir is None:
            raise StoreNotConnected("set_base_dir() must be called before connect()")
        pending, self._on_connect = self._on_connect, []
        self.connected = True
        for handler in pending:
            handler()
        logger.debug("Connected to %s (%d pending handlers)", self.base_dir, len(pending))

    def path_for(self, collection: str) -> Path:
        if self.base_dir is None:
            raise StoreNotConnected("No base directory set")
        if (
            not isinstance(collection, str)
            or not collection
            or collection.startswith(".")
            or "/" in collection
            or "\\" in collection
        ):
            raise InvalidCollectionName(f"Invalid collection name: {collection!r}")
        return self.base_dir / f"{collection}.json"

    def register_collection(self, collection: str):
        p = self.path_for(collection)
        if not p.exists():
            self.write_all(collection, [])
            logger.info("Created collection %s at %s", collection, p)

    def collections(self) -> List[str]:
        if self.base_dir is None:
            raise StoreNotConnected("No base directory set")
        return sorted(p.stem for p in self.base_dir.glob("*.json") if not p.name.startswith("."))

    def lock(self, collection: str) -> threading.RLock:
        with self._locks_guard:
            return self._locks.setdefault(collection, threading.RLock())

    def read_all(self, collection: str) -> List[Record]:
        p = self.path_for(collection)
        try:
            with p.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CollectionNotFound(collection, p) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CollectionParseError(collection, str(e)) from e
        if not isinstance(data, list):
            raise CollectionParseError(collection, f"expected a JSON array, got {type(data).__name__}")
        if not all(isinstance(r, dict) for r in data):
            raise CollectionParseError(collection, "expected an array of objects")
        return data

    def write_all(self, collection: str, records: List[Record]):
        """Overwrite the whole collection file with ``records``."""
        p = self.path_for(collection)
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=p.parent, prefix=f".{p.stem}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(list(records), f, indent=2, ensure_ascii=False)
            os.chmod(tmp_name, _file_mode(p))
            os.replace(tmp_name, p)
        except OSError as e:
            raise StorageError(e.errno, e.strerror, str(p)) from e
        finally:
            # left behind only when the dump or the replace failed
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
