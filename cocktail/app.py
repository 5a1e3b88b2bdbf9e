"""CocktailApp: the single owner of the search, toast and shopping-list state.

Everything is constructed here and passed down explicitly; renderers get the
app (or its `state()` projection) and call the operations below.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional

from cocktail.domain.Drink import DrinkRecord
from cocktail.domain.Ingredient import Ingredient, extract_ingredients
from cocktail.domain.ShoppingList import ShoppingAggregator
from cocktail.events.clock import AsyncioClock, Clock
from cocktail.events.Event_Bus import EventBus
from cocktail.events.Toast_Queue import ToastQueue
from cocktail.infra.cocktail_client import CocktailDBClient
from cocktail.logic.search.coordinator import SearchClient, SearchCoordinator, SearchOutcome
from cocktail.logic.shopping.print_export import format_shopping_list, render_print_html, render_print_pdf
from cocktail.utilities.config import DEFAULT_QUERY, TOAST_DELAY_SECONDS

logger = logging.getLogger(__name__)


class UnknownDrinkError(LookupError):
    """The drink id is not part of the current search results."""


def drink_to_view(drink: DrinkRecord) -> Dict[str, Any]:
    '''What a result card shows: name, thumbnail, shortened instructions, ingredient labels.'''
    ingredients = extract_ingredients(drink)
    return {
        "id": drink.drink_id,
        "name": drink.name,
        "thumbnail": drink.thumbnail,
        "instructions": drink.instructions_preview(),
        "ingredients": [i.to_dict() for i in ingredients],
        "labels": [i.label() for i in ingredients],
    }


class CocktailApp:
    def __init__(self, client: Optional[SearchClient] = None, clock: Optional[Clock] = None,
                 bus: Optional[EventBus] = None, default_query: str = DEFAULT_QUERY,
                 toast_delay: float = TOAST_DELAY_SECONDS):
        self.bus = bus or EventBus()
        self.clock = clock or AsyncioClock()
        self.toasts = ToastQueue(self.clock, toast_delay, self.bus)
        self.shopping = ShoppingAggregator(notify=self.toasts.push, bus=self.bus)
        self.searcher = SearchCoordinator(client or CocktailDBClient(), notify=self.toasts.push,
                                          bus=self.bus, default_query=default_query)

    # --- Search -----------------------------------------------------------
    def start(self):
        return self.searcher.start()

    def search(self, query: Optional[str] = None):
        return self.searcher.search(query)

    async def run_search(self, query: Optional[str] = None) -> Optional[SearchOutcome]:
        return await self.searcher.run_search(query)

    # --- Shopping list ----------------------------------------------------
    def add_drink(self, drink_id: str) -> List[Ingredient]:
        '''Adds every ingredient of a drink from the current results. Returns what was added.'''
        drink = self.searcher.find_drink(drink_id)
        if drink is None:
            raise UnknownDrinkError(f"Drink '{drink_id}' is not in the current results")
        ingredients = extract_ingredients(drink)
        logger.info("Adding %s ingredient(s) from '%s'", len(ingredients), drink.name)
        self.shopping.add_many(ingredients)
        return ingredients

    def add_ingredients(self, ingredients: Iterable[Ingredient]):
        self.shopping.add_many(ingredients)

    def remove_ingredient(self, name: str):
        self.shopping.remove(name)

    # --- Projection -------------------------------------------------------
    def state(self) -> Dict[str, Any]:
        entries = self.shopping.entries()
        return {
            "search": self.searcher.state.to_dict(),
            "results": [drink_to_view(d) for d in self.searcher.results],
            "toasts": [t.to_dict() for t in self.toasts.toasts()],
            "shopping_list": [e.to_dict() for e in entries],
            "shopping_count": len(entries),
        }

    def print_listing(self) -> str:
        return format_shopping_list(self.shopping.snapshot())

    def print_html(self) -> str:
        return render_print_html(self.shopping.snapshot())

    def print_pdf(self) -> bytes:
        return render_print_pdf(self.shopping.snapshot())

    def shutdown(self):
        self.searcher.shutdown()
        self.toasts.clear()
