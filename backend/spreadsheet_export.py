"""
Spreadsheet export — multi-sheet XLSX workbook for a stored quote.

Sheets: Summary, Breakdown, Components, Parameters.
Values are written unrounded; number formats handle presentation.
"""

import io

import pandas as pd

from .formatting import format_m2

CURRENCY_FORMAT = '#,##0.00 "€"'
PERCENT_FORMAT = "0.0%"


def _summary_frame(result: dict) -> pd.DataFrame:
    kit = result.get("kit", {})
    project = result.get("project", {})
    totals = result.get("totals", {})
    return pd.DataFrame({
        "Item": [
            "Client",
            "Project",
            "Quote date",
            "Kit",
            "Area",
            "Total project cost (CTP)",
            "Recommended rental price (PAR)",
            "PAR incl. VAT",
            "Price per m²",
        ],
        "Value": [
            project.get("client_name") or "",
            project.get("project_name") or "",
            project.get("quote_date") or "",
            kit.get("name", ""),
            format_m2(project.get("area_m2", 0)),
            totals.get("ctp", 0),
            totals.get("par", 0),
            totals.get("par_with_vat", 0),
            totals.get("cost_per_m2", 0),
        ],
    })


def _breakdown_frame(result: dict) -> pd.DataFrame:
    totals = result.get("totals", {})
    extras = result.get("breakdown", {}).get("additional_costs", {})
    rows = [
        ("Total purchase cost", totals.get("total_purchase_cost", 0)),
        ("Annual amortization", totals.get("annual_amortization", 0)),
        ("Amortized cost per event", totals.get("amortized_cost_per_event", 0)),
        ("Replacement cost", totals.get("replacement_cost", 0)),
        ("Graphics", extras.get("graphics", 0)),
        ("Logistics", extras.get("logistics", 0)),
        ("Installation", extras.get("installation", 0)),
    ]
    if extras.get("platform") is not None:
        rows.append(("Platform", extras["platform"]))
    rows += [
        ("Additional costs total", totals.get("additional_costs_total", 0)),
        ("Direct costs", totals.get("direct_costs", 0)),
        ("Overhead", totals.get("overhead", 0)),
        ("CTP", totals.get("ctp", 0)),
        ("PAR", totals.get("par", 0)),
        ("PAR incl. VAT", totals.get("par_with_vat", 0)),
    ]
    return pd.DataFrame(rows, columns=["Concept", "Amount"])


def _components_frame(result: dict) -> pd.DataFrame:
    components = result.get("breakdown", {}).get("components", [])
    return pd.DataFrame(
        [
            {
                "Component": c.get("name", ""),
                "Quantity": c.get("quantity", 0),
                "Unit cost": c.get("unit_cost", 0),
                "Total cost": c.get("total_cost", 0),
                "Cost per m²": c.get("per_m2", 0),
                "Amortized per event": c.get("amortized_per_event", 0),
                "Replacement per event": c.get("replacement_per_event", 0),
            }
            for c in components
        ],
        columns=[
            "Component", "Quantity", "Unit cost", "Total cost",
            "Cost per m²", "Amortized per event", "Replacement per event",
        ],
    )


def _parameters_frame(result: dict) -> pd.DataFrame:
    config = result.get("config", {})
    kit = result.get("kit", {})
    return pd.DataFrame({
        "Parameter": [
            "Lifespan (years)",
            "Usage frequency (events/year)",
            "Breakage rate",
            "Overhead rate",
            "Margin rate",
            "VAT rate",
            "Kit base area (m²)",
        ],
        "Value": [
            config.get("lifespan_years", 0),
            config.get("annual_usage_frequency", 0),
            config.get("breakage_rate", 0),
            config.get("overhead_rate", 0),
            config.get("margin_rate", 0),
            config.get("vat_rate", 0),
            kit.get("base_area_m2", 0),
        ],
    })


def generate_quote_workbook(result: dict) -> bytes:
    """Build the XLSX workbook in memory. `result` is quote_to_dict() output."""
    output = io.BytesIO()

    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        _summary_frame(result).to_excel(writer, sheet_name="Summary", index=False)
        _breakdown_frame(result).to_excel(writer, sheet_name="Breakdown", index=False)
        _components_frame(result).to_excel(writer, sheet_name="Components", index=False)
        parameters = _parameters_frame(result)
        parameters.to_excel(writer, sheet_name="Parameters", index=False)

        workbook = writer.book
        currency = workbook.add_format({"num_format": CURRENCY_FORMAT})
        percent = workbook.add_format({"num_format": PERCENT_FORMAT})

        writer.sheets["Summary"].set_column("A:A", 34)
        writer.sheets["Summary"].set_column("B:B", 24, currency)
        writer.sheets["Breakdown"].set_column("A:A", 30)
        writer.sheets["Breakdown"].set_column("B:B", 18, currency)
        writer.sheets["Components"].set_column("A:A", 36)
        writer.sheets["Components"].set_column("B:B", 10)
        writer.sheets["Components"].set_column("C:G", 20, currency)

        params = writer.sheets["Parameters"]
        params.set_column("A:A", 32)
        params.set_column("B:B", 14)
        # Breakage, overhead, margin and VAT are fractions
        for index in range(2, 6):
            params.write_number(index + 1, 1, float(parameters["Value"][index]), percent)

    return output.getvalue()
