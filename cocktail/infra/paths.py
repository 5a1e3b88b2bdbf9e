from pathlib import Path

# Centralized paths for package resources (single source of truth)
PACKAGE_DIR = Path(__file__).parent.parent.resolve()
TEMPLATES_DIR = PACKAGE_DIR / 'templates'
PRINT_TEMPLATE = 'print_shopping_list.html'

__all__ = ['PACKAGE_DIR', 'TEMPLATES_DIR', 'PRINT_TEMPLATE']
