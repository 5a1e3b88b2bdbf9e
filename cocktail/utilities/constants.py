from typing import Final

# TheCocktailDB exposes ingredient/measure pairs as strIngredient1..15 / strMeasure1..15
MAX_INGREDIENT_SLOTS: Final[int] = 15
INSTRUCTIONS_PREVIEW_LENGTH: Final[int] = 200

# User-facing toast texts
MSG_SEARCHING: Final[str] = "Searching..."
MSG_RESULTS: Final[str] = "Here are the results."
MSG_NO_RESULTS: Final[str] = "No results found."
MSG_INGREDIENTS_ADDED: Final[str] = "Ingredients added to shopping list."
MSG_INGREDIENTS_REMOVED: Final[str] = "Ingredients removed from shopping list."

PRINT_TITLE: Final[str] = "Cocktails Assistant"
PRINT_HEADING: Final[str] = "Cocktail: Shopping list"
