"""Key-value byte stores backing the repositories (file persistence)."""
import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from cooknote.domain.errors import PersistenceReadError, PersistenceWriteError
from cooknote.infra.paths import DATA_DIR, file_for_key

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[bytes]: ...

    async def set(self, key: str, value: bytes) -> None: ...


class JsonFileStore:
    """One file per key inside data_dir; writes go through a temp file and a move."""

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return file_for_key(self.data_dir, key)

    def _read(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            raise PersistenceReadError(f"Cannot read {path}: {e}") from e

    def _atomic_write(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        try:
            os.makedirs(path.parent, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=path.suffix)
        except OSError as e:
            raise PersistenceWriteError(f"Cannot write {path}: {e}") from e
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(value)
            shutil.move(tmp_path, path)
        except OSError as e:
            raise PersistenceWriteError(f"Cannot write {path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_path)

    async def get(self, key: str) -> Optional[bytes]:
        return await asyncio.to_thread(self._read, key)

    async def set(self, key: str, value: bytes) -> None:
        await asyncio.to_thread(self._atomic_write, key, value)


class MemoryStore:
    """In-process store, used by tests and ephemeral sessions."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self.data: Dict[str, bytes] = dict(initial or {})
        self.writes = 0

    async def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)
        self.writes += 1
