"""PDF export of a parsed weekly plan and its shopping list using ReportLab."""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape

from .models import MealPlanData

_DEFAULT_FONT = "Helvetica"


def _register_font(font_path: str | Path | None) -> str:
    """Register a TTF font with ReportLab and return its name.

    Without a path the built-in Helvetica is used, which covers the
    accented Latin characters of Italian text.
    """
    if not font_path:
        return _DEFAULT_FONT

    path = Path(font_path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Font not found: {path}")

    from reportlab.pdfbase import pdfmetrics
    from reportlab.pdfbase.ttfonts import TTFont

    font_name = "DietPlanFont"
    pdfmetrics.registerFont(TTFont(font_name, str(path)))
    return font_name


def _item_text(description: str, used: bool) -> str:
    return f"[x] {description}" if used else description


def generate_pdf(
    data: MealPlanData,
    output_path: str | Path,
    font_path: str | Path | None = None,
    title: str = "Piano alimentare settimanale",
) -> Path:
    """Generate a printable PDF from parsed plan data.

    Args:
        data: The weekly plan and shopping list to render.
        output_path: Where to save the PDF file.
        font_path: Optional TTF font to use instead of Helvetica.
        title: Document title.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
        FileNotFoundError: If ``font_path`` does not exist.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required: pip install 'dietplan[pdf]'"
        )

    font_name = _register_font(font_path)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "Title_Plan",
        parent=styles["Title"],
        fontName=font_name,
        fontSize=18,
        leading=24,
    )
    heading_style = ParagraphStyle(
        "Heading_Plan",
        parent=styles["Heading2"],
        fontName=font_name,
        fontSize=14,
        leading=20,
        spaceAfter=3 * mm,
    )
    meal_style = ParagraphStyle(
        "Meal_Plan",
        parent=styles["Heading3"],
        fontName=font_name,
        fontSize=11,
        leading=15,
        spaceBefore=2 * mm,
    )
    cell_style = ParagraphStyle(
        "Cell_Plan",
        parent=styles["Normal"],
        fontName=font_name,
        fontSize=8,
        leading=10,
    )

    def table_style(header_color: str, stripe_color: str) -> TableStyle:
        return TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(header_color)),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, -1), font_name),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("ALIGN", (0, 0), (-1, -1), "LEFT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor(stripe_color)]),
            ("TOPPADDING", (0, 0), (-1, -1), 3),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
            ("LEFTPADDING", (0, 0), (-1, -1), 4),
            ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ])

    elements: list = []
    elements.append(Paragraph(escape(title), title_style))
    elements.append(Spacer(1, 6 * mm))

    meal_table_style = table_style("#4A90D9", "#F5F5F5")
    for day in data.weekly_plan:
        elements.append(Paragraph(day.day, heading_style))
        for meal in day.meals:
            header = f"{meal.name} ({meal.time})"
            if meal.title:
                header = f"{header} · {meal.title}"
            elements.append(Paragraph(escape(header), meal_style))

            if meal.items:
                table_data = [["Ingrediente", "Descrizione"]]
                for item in meal.items:
                    table_data.append([
                        Paragraph(escape(item.ingredient_name), cell_style),
                        Paragraph(escape(_item_text(item.full_description, item.used)), cell_style),
                    ])
                t = Table(table_data, colWidths=[55 * mm, 115 * mm])
                t.setStyle(meal_table_style)
                elements.append(Spacer(1, 2 * mm))
                elements.append(t)
        elements.append(Spacer(1, 6 * mm))

    if data.shopping_list:
        elements.append(Paragraph("Lista della spesa", heading_style))
        table_data = [["Categoria", "Articolo", "Quantità"]]
        for category in data.shopping_list:
            for item in category.items:
                table_data.append([
                    category.category,
                    Paragraph(escape(item.item), cell_style),
                    Paragraph(escape(item.quantity), cell_style),
                ])
        t = Table(table_data, colWidths=[45 * mm, 45 * mm, 80 * mm])
        t.setStyle(table_style("#E67E22", "#FFF3E0"))
        elements.append(t)

    doc.build(elements)
    return output_path
