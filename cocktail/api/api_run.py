from fastapi import FastAPI, HTTPException, Depends
from pydantic import BaseModel, Field
from typing import Optional
import logging

from cocktail.app import CocktailApp, drink_to_view
from cocktail.api.routes import shopping
from cocktail.api.routes.shopping import get_cocktail_app

# Logging
logger = logging.getLogger("cocktail_app")


class SearchRequest(BaseModel):
    query: str = Field(default="", max_length=200)


def create_app(cocktail: Optional[CocktailApp] = None) -> FastAPI:
    """Build the API around one CocktailApp instance (a fresh one when not given)."""
    api = FastAPI(title="Cocktail Shopping Assistant API")
    api.state.cocktail = cocktail or CocktailApp()
    api.include_router(shopping.router)

    @api.on_event("startup")
    async def _startup_initial_search():
        """Issue the default-query search once the event loop is running."""
        api.state.cocktail.start()
        logger.info("Initial search for '%s' issued", api.state.cocktail.searcher.query)

    @api.on_event("shutdown")
    async def _shutdown_state():
        api.state.cocktail.shutdown()

    # -------------------- API: State (JSON) --------------------
    @api.get('/api/state')
    def api_state(cocktail: CocktailApp = Depends(get_cocktail_app)):
        return cocktail.state()

    @api.get('/api/toasts')
    def api_toasts(cocktail: CocktailApp = Depends(get_cocktail_app)):
        toasts = [t.to_dict() for t in cocktail.toasts.toasts()]
        return {"toasts": toasts, "count": len(toasts)}

    # -------------------- API: Search --------------------
    @api.post('/api/search')
    async def api_search(payload: SearchRequest, cocktail: CocktailApp = Depends(get_cocktail_app)):
        outcome = await cocktail.run_search(payload.query)
        logger.info("Search request query=%r outcome=%s", payload.query, outcome)
        state = cocktail.state()
        return {
            "outcome": outcome.value if outcome else None,
            "search": state["search"],
            "results": state["results"],
        }

    @api.get('/api/drinks/{drink_id}')
    def api_drink(drink_id: str, cocktail: CocktailApp = Depends(get_cocktail_app)):
        drink = cocktail.searcher.find_drink(drink_id)
        if drink is None:
            raise HTTPException(status_code=404, detail=f"Drink '{drink_id}' is not in the current results")
        return drink_to_view(drink)

    return api


# Initialize FastAPI app
app = create_app()
