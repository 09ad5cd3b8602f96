"""Simple Event Bus / Observer implementation for data-layer notifications.

Event names:
  recipes.changed      -> payload {"count": int}
  family.changed       -> payload {"count": int}
  storage.write_failed -> payload {"key": str, "error": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

RECIPES_CHANGED = "recipes.changed"
FAMILY_CHANGED = "family.changed"
STORAGE_WRITE_FAILED = "storage.write_failed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# Process-wide bus used when a component is not given its own
GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'RECIPES_CHANGED', 'FAMILY_CHANGED', 'STORAGE_WRITE_FAILED']
