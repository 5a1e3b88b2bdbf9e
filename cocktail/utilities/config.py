"""Configuration management for the Cocktail Shopping Assistant."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Remote search endpoint (TheCocktailDB public test key)
COCKTAIL_API_BASE: Final[str] = os.getenv('COCKTAIL_API_BASE', 'https://www.thecocktaildb.com/api/json/v1/1')
COCKTAIL_API_TIMEOUT: Final[float] = float(os.getenv('COCKTAIL_API_TIMEOUT', '10'))

# Seed term for the search issued once at startup
DEFAULT_QUERY: Final[str] = os.getenv('DEFAULT_QUERY', 'margarita')

# Toasts
TOAST_DELAY_SECONDS: Final[float] = float(os.getenv('TOAST_DELAY_SECONDS', '3.5'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
