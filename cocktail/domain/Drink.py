"""Drink domain entity: one TheCocktailDB search result (id, name, thumbnail, instructions, 15 ingredient slots)."""
from typing import Any, Dict, List, Optional, Tuple

from cocktail.utilities.constants import INSTRUCTIONS_PREVIEW_LENGTH, MAX_INGREDIENT_SLOTS


class DrinkRecord:
    def __init__(self, drink_id: str = "", name: str = "", thumbnail: str = "",
                 instructions: Optional[str] = None,
                 slots: Optional[List[Tuple[Optional[str], Optional[str]]]] = None):
        self.drink_id = drink_id
        self.name = name
        self.thumbnail = thumbnail
        self.instructions = instructions
        # Raw (ingredient, measure) pairs exactly as received, padded to 15
        raw = list(slots[:MAX_INGREDIENT_SLOTS]) if slots else []
        raw += [(None, None)] * (MAX_INGREDIENT_SLOTS - len(raw))
        self.slots = raw

    def instructions_preview(self, limit: int = INSTRUCTIONS_PREVIEW_LENGTH) -> str:
        '''Instructions cut to `limit` characters (with "...") for list views.'''
        if not self.instructions:
            return ""
        if len(self.instructions) > limit:
            return self.instructions[:limit] + "..."
        return self.instructions

    def __str__(self) -> str:
        return f"{self.name} ({self.drink_id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "DrinkRecord":
        '''Creates a DrinkRecord from a TheCocktailDB drink object. Unknown keys are ignored.'''
        slots = []
        for i in range(1, MAX_INGREDIENT_SLOTS + 1):
            slots.append((data.get(f"strIngredient{i}"), data.get(f"strMeasure{i}")))
        return DrinkRecord(
            drink_id=str(data.get("idDrink") or ""),
            name=data.get("strDrink") or "",
            thumbnail=data.get("strDrinkThumb") or "",
            instructions=data.get("strInstructions"),
            slots=slots,
        )

    def to_dict(self) -> Dict[str, Any]:
        '''Converts back to the TheCocktailDB field names.'''
        d: Dict[str, Any] = {
            "idDrink": self.drink_id,
            "strDrink": self.name,
            "strDrinkThumb": self.thumbnail,
            "strInstructions": self.instructions,
        }
        for i, (ingredient, measure) in enumerate(self.slots, start=1):
            d[f"strIngredient{i}"] = ingredient
            d[f"strMeasure{i}"] = measure
        return d
