import pytest

from app.models.rate_table import RateTable
from app.schemas.calculation import ShipmentInput
from app.services.calculator import ShipmentCostCalculator


@pytest.fixture
def shipment_payload() -> dict:
	"""Import shipment, 500 km, 10 days, single stop (form field names)."""
	return {
		"distanceKm": 500,
		"estimatedDays": 10,
		"truckType": "40FT_DRY_VAN",
		"isExport": False,
		"numStops": 1,
		"cifValue": 100000,
		"customsDutyRate": 10,
		"vatRate": 15,
		"whtRate": 2,
		"driverCost": 1000,
		"truckRentalCost": 2000,
		"fuelPrice": 50,
		"handlingCost": 1500,
		"inspectionFee": 500,
	}


@pytest.fixture
def shipment(shipment_payload) -> ShipmentInput:
	return ShipmentInput.model_validate(shipment_payload)


@pytest.fixture
def calculator() -> ShipmentCostCalculator:
	return ShipmentCostCalculator(RateTable())
