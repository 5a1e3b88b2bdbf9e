import io
from datetime import date
from typing import Iterable, Optional

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from cocktail.domain.ShoppingList import ShoppingEntry
from cocktail.utilities.constants import PRINT_HEADING


def generate_pdf_for_shopping_list(entries: Iterable[ShoppingEntry], printed_on: Optional[date] = None) -> bytes:
    """Generate a simple PDF table: Ingredient / Measures, one row per shopping entry."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    printed_on = printed_on or date.today()
    elements = [
        Paragraph(PRINT_HEADING, styles["Title"]),
        Paragraph(printed_on.strftime("%d-%m-%Y"), styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Ingredient", "Measures"]]
    for entry in entries:
        data.append([entry.name, ", ".join(entry.measures) or "-"])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#B23A48")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
