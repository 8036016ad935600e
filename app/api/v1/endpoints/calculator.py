import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from app.core.dependencies import get_calculator
from app.core.exceptions import UnknownTruckType
from app.schemas.calculation import CalculationResult, ShipmentInput
from app.services.calculator import ShipmentCostCalculator
from app.services.report import build_report, render_report_html

router = APIRouter()
logger = logging.getLogger(__name__)


def run_calculation(shipment: ShipmentInput, calculator: ShipmentCostCalculator) -> CalculationResult:
	logger.info("Starting total cost calculation...")
	try:
		result = calculator.calculate(shipment)
	except UnknownTruckType as e:
		logger.error(f"Calculation failed: {e}")
		raise HTTPException(status_code=404, detail=str(e))
	except Exception as e:
		logger.exception("Calculation failed")
		raise HTTPException(status_code=500, detail=f"Calculation failed: {str(e)}")

	if result.optimization.applied:
		logger.info(result.optimization.notes)
	logger.info(
		f"Tax calculation: VAT ({shipment.vat_rate}%) + WHT ({shipment.wht_rate}%) applied to transport subtotal."
	)
	logger.info(f"Total cost calculated: {result.total_optimized_cost} {result.currency}")
	return result


@router.post("/calculate", response_model=CalculationResult)
def calculate_cost(
		shipment: ShipmentInput,
		calculator: ShipmentCostCalculator = Depends(get_calculator)
):
	"""
	Full shipment cost:
	A. Transport (fuel + driver wage + truck rental, optimized route)
	B. Tariffs & fees (handling, inspection, storage penalty) + customs duty
	C. VAT + WHT on subtotal A
	"""
	return run_calculation(shipment, calculator)


@router.post("/calculate/report", response_class=HTMLResponse)
def calculate_cost_report(
		shipment: ShipmentInput,
		calculator: ShipmentCostCalculator = Depends(get_calculator)
):
	"""Same calculation rendered as the HTML breakdown table."""
	result = run_calculation(shipment, calculator)
	report = build_report(result)
	return HTMLResponse(content=render_report_html(report))
