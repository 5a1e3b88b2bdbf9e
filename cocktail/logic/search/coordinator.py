"""Search coordinator.

Owns the search box text and the current result set. Every search gets a
generation number and a cancellation token; issuing a new search cancels the
previous token, and only the latest generation may write results, the
loading flag or the outcome toast (last-issued-wins).

State machine:
    IDLE -> SEARCHING -> SETTLED -> SEARCHING -> ...
"""
from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Set, Tuple

from cocktail.domain.Drink import DrinkRecord
from cocktail.events.Event_Bus import EventBus, SEARCH_STATE
from cocktail.infra.cocktail_client import CancellationToken, CocktailAPIError, SearchCancelled
from cocktail.utilities.config import DEFAULT_QUERY
from cocktail.utilities.constants import MSG_NO_RESULTS, MSG_RESULTS, MSG_SEARCHING

logger = logging.getLogger(__name__)


class SearchPhase(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SETTLED = "settled"


class SearchOutcome(str, Enum):
    RESULTS = "results"
    EMPTY = "empty"
    # Same toast text as EMPTY, kept distinct so callers can tell them apart
    FAILED = "failed"


OUTCOME_MESSAGES = {
    SearchOutcome.RESULTS: MSG_RESULTS,
    SearchOutcome.EMPTY: MSG_NO_RESULTS,
    SearchOutcome.FAILED: MSG_NO_RESULTS,
}


@dataclass
class SearchState:
    query: str = ""
    results: List[DrinkRecord] = field(default_factory=list)
    loading: bool = False
    phase: SearchPhase = SearchPhase.IDLE
    outcome: Optional[SearchOutcome] = None
    # last issued / last committed search
    generation: int = 0
    settled_generation: int = 0

    def to_dict(self):
        return {
            "query": self.query,
            "loading": self.loading,
            "phase": self.phase.value,
            "outcome": self.outcome.value if self.outcome else None,
            "generation": self.generation,
            "count": len(self.results),
        }


class SearchClient(Protocol):
    async def search(self, query: str, token: Optional[CancellationToken] = None) -> List[DrinkRecord]: ...


class SearchCoordinator:
    def __init__(self, client: SearchClient, notify: Optional[Callable[[str], Any]] = None,
                 bus: Optional[EventBus] = None, default_query: str = DEFAULT_QUERY):
        self._client = client
        self._notify = notify
        self._bus = bus
        self._default_query = default_query
        self.state = SearchState(query=default_query)
        self._token: Optional[CancellationToken] = None
        self._tasks: Set[asyncio.Task] = set()
        self._started = False

    # --- Read accessors ---------------------------------------------------
    @property
    def query(self) -> str:
        return self.state.query

    @property
    def results(self) -> List[DrinkRecord]:
        return list(self.state.results)

    @property
    def loading(self) -> bool:
        return self.state.loading

    def find_drink(self, drink_id: str) -> Optional[DrinkRecord]:
        for drink in self.state.results:
            if drink.drink_id == drink_id:
                return drink
        return None

    # --- Operations -------------------------------------------------------
    def set_query(self, text: str):
        '''Records what the search box holds; does not search.'''
        self.state.query = text

    def start(self) -> Optional[asyncio.Task]:
        '''Issues the startup search with the default query. Only the first call does anything.'''
        if self._started:
            return None
        self._started = True
        return self.search(self._default_query)

    def search(self, query: Optional[str] = None) -> Optional[asyncio.Task]:
        '''
        Fire-and-forget search. The "Searching..." toast and the loading flag
        are applied before returning; the lookup itself runs as a task on the
        current event loop. Blank queries are ignored (returns None).
        '''
        q = self.state.query if query is None else query
        if not q or not q.strip():
            return None
        generation, token = self._begin(q)
        task = asyncio.get_running_loop().create_task(self._settle(q, generation, token))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run_search(self, query: Optional[str] = None) -> Optional[SearchOutcome]:
        '''
        Same as search() but awaits settlement. Returns the committed outcome,
        or None when the query was blank or a newer search superseded this one.
        '''
        q = self.state.query if query is None else query
        if not q or not q.strip():
            return None
        generation, token = self._begin(q)
        return await self._settle(q, generation, token)

    async def wait_idle(self):
        '''Waits for every in-flight search task (used at shutdown and in tests).'''
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def shutdown(self):
        if self._token:
            self._token.cancel()
        for task in list(self._tasks):
            task.cancel()
        if self.state.loading:
            self.state.loading = False
            self.state.phase = SearchPhase.SETTLED

    # --- Transitions ------------------------------------------------------
    def _is_current(self, generation: int) -> bool:
        return generation == self.state.generation

    def _begin(self, query: str) -> Tuple[int, CancellationToken]:
        # idle/settled -> searching
        if self._token:
            self._token.cancel()
        token = CancellationToken()
        self._token = token
        self.state.query = query
        self.state.generation += 1
        self._push(MSG_SEARCHING)
        self.state.loading = True
        self.state.phase = SearchPhase.SEARCHING
        self._publish()
        logger.info("Search #%s started: '%s'", self.state.generation, query)
        return self.state.generation, token

    async def _settle(self, query: str, generation: int, token: CancellationToken) -> Optional[SearchOutcome]:
        # searching -> settled, only for the latest generation
        try:
            try:
                drinks = await self._client.search(query, token)
            except SearchCancelled:
                raise
            except CocktailAPIError as e:
                logger.error(f"Search for '{query}' failed: {e}")
                outcome, drinks = SearchOutcome.FAILED, []
            except Exception:
                logger.exception(f"Unexpected error while searching for '{query}'")
                outcome, drinks = SearchOutcome.FAILED, []
            else:
                outcome = SearchOutcome.RESULTS if drinks else SearchOutcome.EMPTY

            if not self._is_current(generation):
                logger.debug("Discarding stale search #%s for '%s'", generation, query)
                return None
            self.state.results = list(drinks)
            self.state.outcome = outcome
            self._push(OUTCOME_MESSAGES[outcome])
            return outcome
        except SearchCancelled:
            logger.debug("Search #%s for '%s' cancelled", generation, query)
            return None
        finally:
            if self._is_current(generation):
                self.state.loading = False
                self.state.phase = SearchPhase.SETTLED
                self.state.settled_generation = generation
                self._publish()

    def _push(self, message: str):
        if self._notify:
            self._notify(message)

    def _publish(self):
        if self._bus:
            self._bus.publish(SEARCH_STATE, self.state)
