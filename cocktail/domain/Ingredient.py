"""Ingredient domain entity: a trimmed (name, measure) pair taken from a drink."""
from typing import Any, Dict, List

from cocktail.domain.Drink import DrinkRecord


class Ingredient:
    def __init__(self, name: str = "", measure: str = ""):
        self.name = name
        self.measure = measure

    def label(self) -> str:
        '''"Lime - 1 oz", or just the name when there is no measure.'''
        if self.measure:
            return f"{self.name} - {self.measure}"
        return self.name

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.measure) == (other.name, other.measure)

    def __hash__(self) -> int:
        return hash((self.name, self.measure))

    def __str__(self) -> str:
        return self.label()

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "Ingredient":
        '''Creates an Ingredient from a dict. Name and measure are trimmed; a missing measure becomes "".'''
        d = dict(data) if isinstance(data, dict) else {}
        name = d.get("name") or ""
        measure = d.get("measure") or ""
        return Ingredient(str(name).strip(), str(measure).strip())

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "measure": self.measure}


def extract_ingredients(drink: DrinkRecord) -> List[Ingredient]:
    """Return the drink's ingredients in slot order.

    Slots whose ingredient name is missing or blank are skipped. The measure
    is trimmed and a missing one is kept as "" rather than dropped.
    """
    ingredients: List[Ingredient] = []
    for name, measure in drink.slots:
        if not name or not name.strip():
            continue
        ingredients.append(Ingredient(name.strip(), measure.strip() if measure else ""))
    return ingredients
