"""
PDF Quote Generator.

Generates the client-facing rental quote from a stored QuoteResult dict.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + client / project
2. Executive summary
3. Cost breakdown
4. Kit components
5. Commercial conditions
6. Notes

Read-only over the stored result — nothing is recomputed here.
"""

from datetime import datetime
from functools import partial

from fpdf import FPDF

from .formatting import format_eur, format_m2, format_percentage

# Built-in PDF fonts are latin-1 only — no euro sign
_fmt = partial(format_eur, symbol="EUR")


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        str(text)
        .replace("•", "-")    # bullet
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("“", '"')    # left double quote
        .replace("”", '"')    # right double quote
        .replace("‘", "'")    # left single quote
        .replace("’", "'")    # right single quote
        .replace("€", "EUR")  # euro sign
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class QuotePDF(FPDF):
    """Custom PDF class for rental quote documents."""

    def __init__(self, company_name=""):
        super().__init__()
        self.company_name = company_name
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # We handle headers manually per section

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, _safe(f"{self.company_name} - Page {self.page_no()}/{{nb}}"), align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "L" if label == "Component" else "R"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        """Render a table data row. First column left-aligned, numbers right-aligned."""
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            self.cell(width, 5.5, str(val), align="L" if i == 0 else "R")
        self.ln()

    def amount_row(self, label, amount, bold=False):
        """Label on the left, formatted amount on the right."""
        self.set_font("Helvetica", "B" if bold else "", 9)
        self.cell(130, 6, _safe(label))
        self.cell(60, 6, _fmt(amount), align="R")
        self.ln()

    def subtotal_row(self, label, amount):
        """Render a subtotal row spanning the full width."""
        self.set_font("Helvetica", "B", 9)
        self.cell(130, 6, _safe(label), align="R", border="T")
        self.cell(60, 6, _fmt(amount), align="R", border="T")
        self.ln(8)


def generate_quote_pdf(
    result: dict,
    company: dict = None,
    quote_number: str = None,
    created_at: str = None,
    valid_days: int = 30,
) -> bytes:
    """
    Generate a PDF quote document.

    Args:
        result: quote_to_dict() output (stored history snapshot)
        company: {"name", "email", "phone"} for the header
        quote_number: display reference, e.g. the history id
        created_at: ISO timestamp; defaults to now

    Returns:
        PDF bytes
    """
    company = company or {}
    company_name = company.get("name") or "Quote"
    contact = " | ".join(p for p in [company.get("email"), company.get("phone")] if p)

    kit = result.get("kit", {})
    config = result.get("config", {})
    project = result.get("project", {})
    totals = result.get("totals", {})
    breakdown = result.get("breakdown", {})

    pdf = QuotePDF(company_name=company_name)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(company_name), new_x="LMARGIN", new_y="NEXT")
    if contact:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(contact), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    try:
        dt = datetime.fromisoformat((created_at or "").replace("Z", "+00:00"))
    except ValueError:
        dt = datetime.utcnow()
    date_str = project.get("quote_date") or dt.strftime("%d/%m/%Y")

    pdf.set_font("Helvetica", "B", 14)
    title = f"RENTAL QUOTE #{quote_number}" if quote_number else "RENTAL QUOTE"
    pdf.cell(0, 8, title, new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, _safe(f"Date: {date_str}"), new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, _safe(f"Kit: {kit.get('name', '')}"), new_x="LMARGIN", new_y="NEXT")

    if project.get("client_name"):
        pdf.cell(0, 5, _safe(f"Prepared for: {project['client_name']}"), new_x="LMARGIN", new_y="NEXT")
    if project.get("project_name"):
        pdf.cell(0, 5, _safe(f"Project: {project['project_name']}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 2: Executive summary ──
    pdf.section_header("EXECUTIVE SUMMARY")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(130, 6, "Stand area")
    pdf.cell(60, 6, _safe(format_m2(project.get("area_m2", 0))), align="R")
    pdf.ln()
    pdf.amount_row("Recommended rental price (PAR)", totals.get("par", 0))
    pdf.amount_row(f"PAR incl. VAT ({format_percentage(config.get('vat_rate', 0))})", totals.get("par_with_vat", 0))
    pdf.amount_row("Price per m²", totals.get("cost_per_m2", 0))
    pdf.ln(4)

    # ── SECTION 3: Cost breakdown ──
    pdf.section_header("COST BREAKDOWN")
    extras = breakdown.get("additional_costs", {})
    rows = [
        ("Amortized cost per event", totals.get("amortized_cost_per_event", 0)),
        ("Replacement (breakage) cost", totals.get("replacement_cost", 0)),
        ("Graphics", extras.get("graphics", 0)),
        ("Logistics", extras.get("logistics", 0)),
        ("Installation", extras.get("installation", 0)),
    ]
    if extras.get("platform") is not None:
        rows.append(("Platform", extras["platform"]))
    for label, amount in rows:
        pdf.amount_row(label, amount)
    pdf.subtotal_row("Direct costs", totals.get("direct_costs", 0))

    pdf.amount_row(f"Overhead ({format_percentage(config.get('overhead_rate', 0))})", totals.get("overhead", 0))
    pdf.amount_row("Total project cost (CTP)", totals.get("ctp", 0), bold=True)
    margin_amount = totals.get("par", 0) - totals.get("ctp", 0)
    pdf.amount_row(f"Margin ({format_percentage(config.get('margin_rate', 0))} of price)", margin_amount)
    pdf.amount_row("Recommended rental price (PAR)", totals.get("par", 0), bold=True)
    vat_amount = totals.get("par_with_vat", 0) - totals.get("par", 0)
    pdf.amount_row(f"VAT ({format_percentage(config.get('vat_rate', 0))})", vat_amount)

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  QUOTE TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(totals.get('par_with_vat', 0))}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # ── SECTION 4: Components ──
    pdf.section_header("KIT COMPONENTS")
    cols = [("Component", 70), ("Qty", 20), ("Unit", 30), ("Total", 35), ("Per m²", 35)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)
    for comp in breakdown.get("components", []):
        pdf.table_row(
            [
                _safe(str(comp.get("name", ""))[:40]),
                f"{comp.get('quantity', 0):g}",
                _fmt(comp.get("unit_cost", 0)),
                _fmt(comp.get("total_cost", 0)),
                _fmt(comp.get("per_m2", 0)),
            ],
            widths,
        )
    pdf.subtotal_row("Total purchase cost", totals.get("total_purchase_cost", 0))

    # ── SECTION 5: Commercial conditions ──
    pdf.section_header("COMMERCIAL CONDITIONS")
    conditions = [
        "Deposit: 80% on order confirmation",
        "Balance: 20% on delivery",
        f"VAT: {format_percentage(config.get('vat_rate', 0))} included in final prices",
        f"Quote validity: {valid_days} days",
        f"Estimated kit lifespan: {config.get('lifespan_years', 0):g} years",
        f"Usage frequency: {config.get('annual_usage_frequency', 0):g} events/year",
    ]
    pdf.set_font("Helvetica", "", 8)
    for condition in conditions:
        pdf.set_x(pdf.l_margin)
        pdf.cell(pw, 4.5, _safe(f"  - {condition}"), new_x="LMARGIN", new_y="NEXT")

    # ── SECTION 6: Notes ──
    notes = project.get("notes")
    if notes:
        pdf.ln(3)
        pdf.section_header("NOTES")
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(0, 4.5, _safe(notes))

    return pdf.output()
