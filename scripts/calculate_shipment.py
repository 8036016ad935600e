import argparse
import json
import logging
import sys
from pathlib import Path

from app.core.config import settings
from app.core.dependencies import load_rate_table
from app.core.exceptions import CostEngineError, InvalidInput
from app.services.calculator import ShipmentCostCalculator, parse_shipment
from app.services.report import build_report, render_report_html, render_report_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
	parser = argparse.ArgumentParser(description="Calculate the total cost of one shipment from a JSON file.")
	parser.add_argument("shipment", type=Path, help="JSON file with the shipment parameters (camelCase keys)")
	parser.add_argument("--html", action="store_true", help="print the HTML report instead of plain text")
	args = parser.parse_args(argv)

	logging.basicConfig(level=settings.LOG_LEVEL)

	try:
		with open(args.shipment, "r", encoding="utf-8") as f:
			data = json.load(f)
	except (OSError, json.JSONDecodeError) as e:
		logger.error(f"Cannot read {args.shipment}: {e}")
		return 2

	try:
		shipment = parse_shipment(data)
		rate_table = load_rate_table(settings)
		result = ShipmentCostCalculator(rate_table).calculate(shipment)
	except InvalidInput as e:
		truck_errors = [err for err in e.errors if err.get("loc", ())[:1] in (("truckType",), ("truck_type",))]
		if truck_errors:
			logger.error(f"Unknown truck type: {truck_errors[0].get('input')!r}")
		else:
			logger.error(f"Please enter valid, positive numbers for all fields. {e}")
		return 1
	except CostEngineError as e:
		logger.error(f"Calculation failed: {e}")
		return 1

	logger.info(f"Total cost calculated: {result.total_optimized_cost} {result.currency}")

	report = build_report(result)
	print(render_report_html(report) if args.html else render_report_text(report))
	return 0


if __name__ == "__main__":
	sys.exit(main())
