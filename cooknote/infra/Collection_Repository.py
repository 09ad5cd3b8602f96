"""Whole-collection JSON persistence shared by the recipe and family repositories.

Every mutation re-reads the full collection from the store, changes it in
memory and writes the full collection back. There is no locking or version
check: callers must not run two mutations against one repository at once.
"""
import asyncio
import json
import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from cooknote.domain.errors import PersistenceReadError, PersistenceWriteError
from cooknote.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, STORAGE_WRITE_FAILED
from cooknote.infra.storage import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionRepository(Generic[T]):
    def __init__(self, store: KeyValueStore, key: str, from_dict: Callable[[Any], T],
                 seed_factory: Callable[[], List[T]], changed_event: str,
                 bus: Optional[EventBus] = None):
        self.store = store
        self.key = key
        self._from_dict = from_dict
        self._seed_factory = seed_factory
        self._changed_event = changed_event
        self.bus = bus or GLOBAL_EVENT_BUS
        self._pending_seed: Optional[asyncio.Task] = None

    def _encode(self, items: List[T]) -> bytes:
        return json.dumps([item.to_dict() for item in items], ensure_ascii=False, indent=2).encode("utf-8")

    def _decode(self, raw: bytes) -> List[T]:
        data = json.loads(raw.decode("utf-8"))
        if not isinstance(data, list):
            raise PersistenceReadError(f"{self.key} does not hold a JSON array")
        return [self._from_dict(entry) for entry in data if isinstance(entry, dict)]

    async def wait_pending(self) -> None:
        """Wait for a background seed write, if one is still in flight."""
        task = self._pending_seed
        if task is not None and not task.done():
            await task
        self._pending_seed = None

    async def _load(self) -> List[T]:
        await self.wait_pending()
        try:
            raw = await self.store.get(self.key)
        except PersistenceReadError as e:
            logger.error("Failed to read %s, using default data: %s", self.key, e)
            return self._seed_factory()
        if raw is None:
            seed = self._seed_factory()
            payload = self._encode(seed)
            # Seed is returned right away; the write finishes in the background
            self._pending_seed = asyncio.create_task(self._write(payload, len(seed)))
            logger.info("Seeded %s with %d default entries", self.key, len(seed))
            return seed
        try:
            return self._decode(raw)
        except (ValueError, ArithmeticError, TypeError, PersistenceReadError) as e:
            logger.error("Corrupt data under %s, using default data: %s", self.key, e)
            return self._seed_factory()

    async def _write(self, payload: bytes, count: int) -> bool:
        try:
            await self.store.set(self.key, payload)
        except PersistenceWriteError as e:
            logger.error("Failed to save %s: %s", self.key, e)
            self.bus.publish(STORAGE_WRITE_FAILED, {"key": self.key, "error": str(e)})
            return False
        self.bus.publish(self._changed_event, {"count": count})
        return True

    async def _save(self, items: List[T]) -> bool:
        """Overwrite the whole collection. Failures are logged and reported, never raised."""
        # A pending seed write must land before this one
        await self.wait_pending()
        return await self._write(self._encode(items), len(items))

    async def get_all(self) -> List[T]:
        return list(await self._load())

    async def reset(self, items: List[T]) -> List[T]:
        await self.wait_pending()
        new_items = list(items)
        await self._save(new_items)
        return new_items
