"""ShoppingList aggregate: ingredients from chosen drinks, merged case-insensitively with their distinct measures."""
import logging
import unicodedata
from typing import Any, Callable, Dict, Iterable, List, Optional

from cocktail.domain.Ingredient import Ingredient
from cocktail.events.Event_Bus import EventBus, SHOPPING_CHANGED
from cocktail.utilities.constants import MSG_INGREDIENTS_ADDED, MSG_INGREDIENTS_REMOVED

logger = logging.getLogger(__name__)


def _key(name: str) -> str:
    return (name or '').lower()


def sort_key(name: str):
    '''
    Collation key close to a browser's localeCompare: accents and case are
    ignored first, then the original spelling breaks ties.
    '''
    decomposed = unicodedata.normalize('NFKD', name)
    base = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), name.casefold(), name)


class ShoppingEntry:
    def __init__(self, name: str, measures: Optional[List[str]] = None):
        self.name = name
        self.measures: List[str] = []
        for m in measures or []:
            self.add_measure(m)

    def add_measure(self, measure: str) -> bool:
        '''Appends a measure unless it is empty or already listed.'''
        if not measure or measure in self.measures:
            return False
        self.measures.append(measure)
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingEntry):
            return NotImplemented
        return self.name == other.name and self.measures == other.measures

    def __str__(self) -> str:
        if self.measures:
            return f"{self.name} ({', '.join(self.measures)})"
        return self.name

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "measures": list(self.measures)}


class ShoppingAggregator:
    def __init__(self, notify: Optional[Callable[[str], Any]] = None, bus: Optional[EventBus] = None):
        # lowercase name -> entry; dict order is insertion order
        self._entries: Dict[str, ShoppingEntry] = {}
        self._notify = notify
        self._bus = bus

    def add_many(self, ingredients: Iterable[Ingredient]):
        '''
        Merges a batch of ingredients into the list. The first casing seen for
        a name is kept; measures accumulate without duplicates or blanks.
        One confirmation toast per call.
        '''
        count = 0
        for ing in ingredients:
            k = _key(ing.name)
            entry = self._entries.get(k)
            if entry is None:
                self._entries[k] = ShoppingEntry(ing.name, [ing.measure])
            else:
                entry.add_measure(ing.measure)
            count += 1
        logger.info("Added %s ingredient(s); list now has %s entries", count, len(self._entries))
        self._changed("add", MSG_INGREDIENTS_ADDED)

    def remove(self, name: str):
        '''Removes the entry for `name` (any casing). Unknown names are a no-op, but still confirmed.'''
        removed = self._entries.pop(_key(name), None)
        if removed is None:
            logger.debug("Remove ignored, '%s' not on the shopping list", name)
        self._changed("remove", MSG_INGREDIENTS_REMOVED)

    def _changed(self, action: str, message: str):
        if self._notify:
            self._notify(message)
        if self._bus:
            self._bus.publish(SHOPPING_CHANGED, {"action": action, "count": len(self._entries)})

    def get(self, name: str) -> Optional[ShoppingEntry]:
        return self._entries.get(_key(name))

    def entries(self) -> List[ShoppingEntry]:
        '''Entries in the order they were first added (live sidebar order).'''
        return [ShoppingEntry(e.name, e.measures) for e in self._entries.values()]

    def snapshot(self) -> List[ShoppingEntry]:
        '''Entries sorted by name, ascending (print order).'''
        return sorted(self.entries(), key=lambda e: sort_key(e.name))

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and _key(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(e) for e in self.entries())
        return f"Shopping List:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
