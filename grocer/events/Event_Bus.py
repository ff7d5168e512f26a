"""Simple Event Bus / Observer implementation for collection changes.

Event names used so far:
  collection.changed -> payload {"collection": str, "items": list}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
COLLECTION_CHANGED = "collection.changed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def publish(self, event_name: str, payload: Any):
		# Subscribers run synchronously; an error propagates to the publisher.
		logger.debug("Publishing %s to %d subscriber(s)", event_name, self.subscriber_count(event_name))
		for cb in list(self._subscribers.get(event_name, [])):
			cb(event_name, payload)

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))


__all__ = ['EventBus', 'COLLECTION_CHANGED']
