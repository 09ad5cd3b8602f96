"""Observers that keep recent data-layer events for the web layer.

An EventLog subscribes to an EventBus and stores a bounded ring buffer of
recent events. Each event gets an auto-increment id (cursor) so clients can
poll for newer events only (since=<last_id_seen>).
"""
from __future__ import annotations
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List

from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, RECIPES_CHANGED, FAMILY_CHANGED, STORAGE_WRITE_FAILED

MAX_EVENTS = 300


class EventLog:
    def __init__(self, bus: EventBus = GLOBAL_EVENT_BUS, max_events: int = MAX_EVENTS):
        self.bus = bus
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._started = False

    def _record(self, event_name: str, payload: Any):
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                for k in ('count', 'key', 'error'):
                    if k in payload:
                        evt[k] = payload[k]
            self._events.append(evt)
            self._next_id += 1
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def start(self):
        """Idempotent start: subscribe once."""
        if self._started:
            return
        for name in (RECIPES_CHANGED, FAMILY_CHANGED, STORAGE_WRITE_FAILED):
            self.bus.subscribe(name, self._record)
        self._started = True

    def get_events(self, since: int | None = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive) plus the cursor to poll with next."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'MAX_EVENTS']
