from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel, field_validator
import logging

from cocktail.app import CocktailApp, UnknownDrinkError
from cocktail.domain.Ingredient import Ingredient

router = APIRouter()
logger = logging.getLogger(__name__)


def get_cocktail_app(request: Request) -> CocktailApp:
    return request.app.state.cocktail


class IngredientIn(BaseModel):
    name: str
    measure: Optional[str] = ""

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("measure")
    @classmethod
    def _trim_measure(cls, v: Optional[str]) -> str:
        return (v or "").strip()


class AddRequest(BaseModel):
    drink_id: Optional[str] = None
    ingredients: Optional[List[IngredientIn]] = None


# === Shopping list (JSON) ===
@router.get('/api/shopping-list')
def api_shopping_list(cocktail: CocktailApp = Depends(get_cocktail_app)):
    items = [e.to_dict() for e in cocktail.shopping.entries()]
    return {"items": items, "count": len(items)}


@router.post('/api/shopping-list/add')
async def api_shopping_list_add(payload: AddRequest, cocktail: CocktailApp = Depends(get_cocktail_app)):
    if payload.drink_id is None and payload.ingredients is None:
        raise HTTPException(status_code=400, detail="Provide 'drink_id' or 'ingredients'")
    if payload.drink_id is not None:
        try:
            added = cocktail.add_drink(payload.drink_id)
        except UnknownDrinkError as e:
            raise HTTPException(status_code=404, detail=str(e))
    else:
        added = [Ingredient(i.name, i.measure) for i in payload.ingredients]
        cocktail.add_ingredients(added)
    return {"added": [i.to_dict() for i in added], "count": len(cocktail.shopping)}


@router.delete('/api/shopping-list/{name}')
async def api_shopping_list_remove(name: str, cocktail: CocktailApp = Depends(get_cocktail_app)):
    cocktail.remove_ingredient(name)
    return {"removed": name, "count": len(cocktail.shopping)}


# === Print / export ===
@router.get('/api/shopping-list/print', response_class=HTMLResponse)
def api_shopping_list_print(cocktail: CocktailApp = Depends(get_cocktail_app)):
    return HTMLResponse(content=cocktail.print_html())


@router.get('/api/shopping-list/text', response_class=PlainTextResponse)
def api_shopping_list_text(cocktail: CocktailApp = Depends(get_cocktail_app)):
    return PlainTextResponse(content=cocktail.print_listing())


@router.get('/api/shopping-list/export_pdf')
def api_shopping_list_pdf(cocktail: CocktailApp = Depends(get_cocktail_app)):
    pdf_bytes = cocktail.print_pdf()
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=shopping_list.pdf"
        },
    )
