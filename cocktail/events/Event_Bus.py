"""Simple Event Bus / Observer implementation for the assistant's state managers.

Event names used so far:
  toast.pushed     -> payload Toast
  toast.expired    -> payload Toast
  shopping.changed -> payload {"action": "add"|"remove", "count": int}
  search.state     -> payload SearchState (after every phase transition)

Subscribers are callables taking (event_name, payload). Each CocktailApp owns
its own bus; there is no process-wide instance.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
TOAST_PUSHED = "toast.pushed"
TOAST_EXPIRED = "toast.expired"
SHOPPING_CHANGED = "shopping.changed"
SEARCH_STATE = "search.state"


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
		# Subscriber errors are logged, never raised to the publisher
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("[EventBus] Error delivering %s to %r", event_name, cb)


__all__ = [
	'EventBus', 'TOAST_PUSHED', 'TOAST_EXPIRED', 'SHOPPING_CHANGED', 'SEARCH_STATE'
]
