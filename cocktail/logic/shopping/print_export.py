"""Shopping list serialisation for printing.

Every function takes the alphabetical `ShoppingAggregator.snapshot()` and
renders it as plain text, a standalone HTML page or a PDF.
"""
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cocktail.domain.ShoppingList import ShoppingEntry
from cocktail.infra.paths import TEMPLATES_DIR, PRINT_TEMPLATE
from cocktail.infra.pdf_utils import generate_pdf_for_shopping_list
from cocktail.utilities.constants import PRINT_HEADING, PRINT_TITLE

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def format_entry(entry: ShoppingEntry) -> str:
    if entry.measures:
        return f"{entry.name} - {', '.join(entry.measures)}"
    return entry.name


def format_shopping_list(entries: Iterable[ShoppingEntry]) -> str:
    """One line per entry: the name, then its measures comma-joined."""
    lines: List[str] = [format_entry(e) for e in entries]
    return "\n".join(lines)


def render_print_html(entries: Iterable[ShoppingEntry]) -> str:
    """Printable HTML document for the shopping list (names and measures are escaped)."""
    template = _env.get_template(PRINT_TEMPLATE)
    return template.render(title=PRINT_TITLE, heading=PRINT_HEADING, items=list(entries))


def render_print_pdf(entries: Iterable[ShoppingEntry]) -> bytes:
    return generate_pdf_for_shopping_list(entries)


__all__ = ['format_entry', 'format_shopping_list', 'render_print_html', 'render_print_pdf']
