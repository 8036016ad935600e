import pytest
from fastapi.testclient import TestClient

from main import app
from app.core.dependencies import get_rate_table
from app.models.rate_table import RateTable
from app.models.trucks import DEFAULT_TRUCK_PROFILES, TruckType


@pytest.fixture
def client():
	app.dependency_overrides[get_rate_table] = lambda: RateTable()
	with TestClient(app) as test_client:
		yield test_client
	app.dependency_overrides.clear()


def test_index(client):
	response = client.get("/")
	assert response.status_code == 200
	assert response.json()["name"]


def test_calculate(client, shipment_payload):
	response = client.post("/api/v1/calculate", json=shipment_payload)

	assert response.status_code == 200
	data = response.json()
	assert data["totalOptimizedCost"] == "58,005.58"
	assert data["totalCost"] == pytest.approx(58005.5827, abs=1e-4)
	assert data["tariffSubtotal"] == pytest.approx(12384)
	assert data["transport"]["driverCost"] == 10000
	assert data["tax"]["vatCost"] == pytest.approx(5848.92, abs=0.005)
	assert data["duty"]["dutyNotes"] == "Calculated on CIF Value (100,000.00 ETB) at 10%."
	assert [item["name"] for item in data["tariffs"]["breakdown"]] == [
		"Dry Port Handling", "Customs Inspection Fee", "Storage Penalty"
	]
	assert data["optimization"]["actualDistance"] == 500
	assert data["rates"]["truckType"] == "40FT_DRY_VAN"
	assert data["isExport"] is False


def test_calculate_with_route_optimization(client, shipment_payload):
	response = client.post("/api/v1/calculate", json={**shipment_payload, "numStops": 4})

	optimization = response.json()["optimization"]
	assert optimization["actualDistance"] == pytest.approx(450)
	assert optimization["applied"] is True


@pytest.mark.parametrize("field, value", [
	("distanceKm", -5),
	("estimatedDays", 0),
	("numStops", 0),
	("truckType", "53FT_TRAILER"),
	("whtRate", "abc"),
])
def test_calculate_rejects_invalid_input(client, shipment_payload, field, value):
	response = client.post("/api/v1/calculate", json={**shipment_payload, field: value})
	assert response.status_code == 422


@pytest.mark.parametrize("field", ["isExport", "fuelPrice", "numStops"])
def test_calculate_rejects_missing_field(client, shipment_payload, field):
	payload = {key: value for key, value in shipment_payload.items() if key != field}

	response = client.post("/api/v1/calculate", json=payload)

	assert response.status_code == 422
	assert response.json()["detail"][0]["type"] == "missing"


def test_calculate_truck_without_profile(client, shipment_payload):
	"""Truck type is valid but the configured rate table has no profile for it"""
	only_dry_van = RateTable(trucks={TruckType.DRY_VAN_40FT: DEFAULT_TRUCK_PROFILES[TruckType.DRY_VAN_40FT]})
	app.dependency_overrides[get_rate_table] = lambda: only_dry_van

	response = client.post("/api/v1/calculate", json={**shipment_payload, "truckType": "40FT_REEFER"})

	assert response.status_code == 404
	assert "40FT_REEFER" in response.json()["detail"]


def test_calculate_report(client, shipment_payload):
	response = client.post("/api/v1/calculate/report", json=shipment_payload)

	assert response.status_code == 200
	assert response.headers["content-type"].startswith("text/html")
	assert "TOTAL OPTIMIZED COST (ETB)" in response.text
	assert "58,005.58" in response.text


def test_trucks(client):
	response = client.get("/api/v1/trucks")

	assert response.status_code == 200
	assert {truck["truck_type"] for truck in response.json()} == {t.value for t in TruckType}


def test_truck_by_type(client):
	response = client.get("/api/v1/trucks/40FT_REEFER")
	assert response.json()["fuel_efficiency_km_l"] == 2.5

	assert client.get("/api/v1/trucks/UNKNOWN").status_code == 404


def test_rates(client):
	data = client.get("/api/v1/rates").json()

	assert data["export_discount_factor"] == 0.6
	assert data["optimization_discount"] == 0.1
	assert data["storage_penalty_rate"] == 192.0
	assert data["storage_free_days"] == 8
	assert len(data["trucks"]) == 3
