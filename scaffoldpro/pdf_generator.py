"""
PDF export of a scaffolding calculation.

Generates a printable document from a CalculationResult dict.
Uses fpdf2 (pure Python, no system dependencies).

Sections, always present:
1. Header + Project Summary
2. Component Breakdown
3. Load Information
4. Assumptions + Disclaimer
"""

from datetime import datetime

from fpdf import FPDF

from .config import settings

# Component display names, in table order
COMPONENT_NAMES = {
    "frames": "Frames",
    "cross_braces": "Cross Braces",
    "base_plates": "Base Plates",
    "platforms": "Platforms",
    "screw_jacks": "Screw Jacks",
    "toe_boards": "Toe Boards",
    "outriggers": "Outriggers",
    "ladders": "Ladders",
    "guardrails": "Guardrails",
    "leg_holders": "Leg Holders",
    "wall_attachments": "Wall Attachments",
    "side_guardrails": "Side Guardrails",
}

DISCLAIMER = (
    "Quantities are planning estimates. They are not a certified structural "
    "design; have the erected scaffold inspected by a competent person."
)


def format_number(value) -> str:
    """Format a number with thousands separators: 12345 -> 12,345"""
    try:
        number = float(value)
    except (ValueError, TypeError):
        return "0"
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.2f}"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        str(text)
        .replace("•", "-")    # bullet
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("×", "x")    # multiplication sign
        .replace("’", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class CalculationPDF(FPDF):
    """Custom PDF class for calculation result documents."""

    def __init__(self):
        super().__init__()
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"{settings.COMPANY_WEBSITE}  |  Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(255, 107, 0)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def key_value(self, label, value):
        self.set_font("Helvetica", "B", 9)
        self.cell(45, 5.5, _safe(label))
        self.set_font("Helvetica", "", 9)
        self.cell(0, 5.5, _safe(str(value)), new_x="LMARGIN", new_y="NEXT")


def generate_calculation_pdf(result: dict, inputs: dict = None) -> bytes:
    """
    Generate a PDF document for one calculation.

    Args:
        result: CalculationResult dict from the calculator
        inputs: the request fields the result was computed from (optional)

    Returns:
        PDF bytes
    """
    inputs = inputs or {}
    pdf = CalculationPDF()
    pdf.alias_nb_pages()
    pdf.add_page()

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(settings.COMPANY_NAME), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(100, 100, 100)
    pdf.cell(0, 5, _safe(settings.COMPANY_EMAIL), new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "Scaffolding Calculation Results", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {datetime.utcnow().strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    pdf.section_header("PROJECT SUMMARY")
    pdf.key_value("Dimensions:", result.get("dimensions", ""))
    pdf.key_value("Total Area:", f"{format_number(result.get('area', 0))} m2")
    pdf.key_value("Frame Size:", result.get("frame_size", ""))
    pdf.key_value("Platform Type:", result.get("platform_length", ""))
    pdf.key_value("Working Levels:", result.get("work_levels", ""))
    pdf.key_value("Building Sides:", result.get("building_sides", ""))
    pdf.key_value("Safety Factor:", result.get("safety_factor", ""))
    sides = inputs.get("sides")
    if sides:
        measured = ", ".join(
            f"{s.get('width', 0):g} x {s.get('height', 0):g} m" for s in sides
        )
        pdf.key_value("Measured Sides:", measured)
    elif inputs.get("area"):
        pdf.key_value("Entered Area:", f"{format_number(inputs['area'])} m2 at {inputs.get('height', 0):g} m")
    pdf.ln(4)

    # ── SECTION 2: Component Breakdown ──
    pdf.section_header("COMPONENT BREAKDOWN")
    cols = [("Component", 50), ("Qty", 20), ("Specification", 120)]
    pdf.set_font("Helvetica", "B", 8)
    pdf.set_fill_color(240, 240, 240)
    for label, width in cols:
        pdf.cell(width, 6, label, border="B", fill=True, align="R" if label == "Qty" else "L")
    pdf.ln()

    pdf.set_font("Helvetica", "", 8)
    components = result.get("components", {})
    for kind, line in components.items():
        name = COMPONENT_NAMES.get(kind, kind.replace("_", " ").title())
        pdf.cell(50, 5.5, _safe(name))
        pdf.cell(20, 5.5, format_number(line.get("quantity", 0)), align="R")
        pdf.cell(120, 5.5, "  " + _safe(line.get("specification", ""))[:80])
        pdf.ln()

    pdf.set_font("Helvetica", "B", 9)
    pdf.cell(50, 6, "Total Components", border="T")
    pdf.cell(20, 6, format_number(result.get("total_components", 0)), border="T", align="R")
    pdf.cell(120, 6, "", border="T")
    pdf.ln(10)

    # ── SECTION 3: Load Information ──
    pdf.section_header("LOAD INFORMATION")
    pdf.key_value("Estimated Weight:", f"{format_number(result.get('weight', 0))} kg")
    pdf.key_value("Max Load Capacity:", f"{format_number(result.get('load_capacity', 0))} kg/m2")
    pdf.key_value("Scaffold Coverage:", f"{format_number(result.get('scaffold_coverage', 0))} m2")
    pdf.ln(4)

    # ── SECTION 4: Assumptions ──
    assumptions = result.get("assumptions", [])
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width
    if assumptions:
        pdf.section_header("ASSUMPTIONS")
        pdf.set_font("Helvetica", "", 8)
        for a in assumptions:
            pdf.set_x(pdf.l_margin)
            pdf.multi_cell(pw, 4.5, _safe(f"  - {a}"), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(3)

    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.multi_cell(pw, 4, _safe(DISCLAIMER), new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return pdf.output()
