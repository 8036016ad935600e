# app/services/report.py
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.schemas.calculation import CalculationResult
from app.schemas.report import CostReport, ReportRow, ReportSection
from app.services.formatting import format_etb, format_number

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
	loader=FileSystemLoader(str(TEMPLATE_DIR)),
	autoescape=select_autoescape(["html"]),
	trim_blocks=True,
	lstrip_blocks=True,
)


def _row(label: str, amount: float, is_sub: bool = True) -> ReportRow:
	return ReportRow(label=label, amount=amount, formatted=format_etb(amount), is_sub=is_sub)


def _section(title: str, subtotal: float, rows: list[ReportRow]) -> ReportSection:
	return ReportSection(title=title, subtotal=subtotal, formatted_subtotal=format_etb(subtotal), rows=rows)


def build_report(result: CalculationResult) -> CostReport:
	"""
	Three-section breakdown of a calculation:
	A. Transport, B. Tariffs & fees (customs duty included), C. Taxes on A.
	"""
	rates = result.rates
	transport, tariffs, duty, tax = result.transport, result.tariffs, result.duty, result.tax
	optimization = result.optimization

	# --- A. TRANSPORT ---
	transport_rows = [
		_row("Fuel Cost (Optimized)", transport.fuel_cost),
		_row(f"Driver Wage (for {transport.billable_days} days)", transport.driver_cost),
		_row("Truck Rental (Fixed Cost)", transport.truck_rent),
	]

	# --- B. TARIFFS & FEES ---
	tariff_rows = []
	if duty.duty_cost > 0 or rates.customs_duty_rate > 0:
		tariff_rows.append(_row(f"Gomruk Customs Duty ({format_number(rates.customs_duty_rate)}%)", duty.duty_cost))

	# free period of the rate table the result was priced with
	over_free_period = rates.estimated_days > tariffs.storage_free_days
	for item in tariffs.breakdown:
		if item.cost > 0 or ("Penalty" in item.name and over_free_period):
			tariff_rows.append(_row(item.name, item.cost))

	# --- C. TAXES ---
	tax_rows = [
		_row(f"VAT ({format_number(rates.vat_rate)}%)", tax.vat_cost),
		_row(f"WHT ({format_number(rates.wht_rate)}%)", tax.wht_cost),
	]

	route_summary = (
		f"Route: {format_number(optimization.original_distance)} KM → "
		f"{format_etb(optimization.actual_distance)} KM | Days: {rates.estimated_days} | "
		f"Cargo: {'EXPORT' if result.is_export else 'IMPORT'}"
	)

	return CostReport(
		title="TOTAL COST BREAKDOWN (Optimized Route)",
		route_summary=route_summary,
		sections=[
			_section("A. TRANSPORT COST (Subtotal A)", transport.total_transport_cost, transport_rows),
			_section("B. TARIFFS & FEES", result.tariff_subtotal, tariff_rows),
			_section("C. TAXES & COMPLIANCE (On Subtotal A)", tax.total_tax, tax_rows),
		],
		total_label=f"TOTAL OPTIMIZED COST ({result.currency})",
		total_formatted=result.total_optimized_cost,
		optimization_note=optimization.notes,
	)


def render_report_html(report: CostReport) -> str:
	return env.get_template("report.html").render(report=report)


def render_report_text(report: CostReport) -> str:
	width = 60
	lines = [report.title, report.route_summary, "-" * width]
	for section in report.sections:
		lines.append(f"{section.title:<44}{section.formatted_subtotal:>16}")
		for row in section.rows:
			lines.append(f"  {row.label:<42}{row.formatted:>16}")
	lines.append("-" * width)
	lines.append(f"{report.total_label:<44}{report.total_formatted:>16}")
	lines.append(f"Optimization Note: {report.optimization_note}")
	return "\n".join(lines)
