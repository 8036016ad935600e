from typing import List
from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from app.models.trucks import TruckType
from app.services.formatting import format_etb


class CamelModel(BaseModel):
	# Wire names are camelCase (distanceKm, estimatedDays...), attributes are snake_case
	model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Input data ---
class ShipmentInput(CamelModel):
	model_config = ConfigDict(allow_inf_nan=False)

	distance_km: float = Field(gt=0, description="Base route distance, km")
	estimated_days: int = Field(gt=0, description="Planned trip duration, days")
	truck_type: TruckType
	is_export: bool
	num_stops: int = Field(ge=1, description="Delivery stop count")
	cif_value: float = Field(ge=0, description="Customs value basis (import only)")

	# --- Percentages ---
	customs_duty_rate: float = Field(ge=0, le=100)
	vat_rate: float = Field(ge=0, le=100)
	wht_rate: float = Field(ge=0, le=100)

	# --- Per-unit rates ---
	driver_cost: float = Field(ge=0, description="Driver wage per day")
	truck_rental_cost: float = Field(ge=0, description="Truck rental per day")
	fuel_price: float = Field(ge=0, description="Price per liter")
	handling_cost: float = Field(ge=0, description="Dry port handling per container")
	inspection_fee: float = Field(ge=0, description="Customs inspection per shipment")


# --- Section A ---
class TransportCost(CamelModel):
	fuel_cost: float
	driver_cost: float
	truck_rent: float
	total_transport_cost: float
	total_liters_used: float
	billable_days: int


# --- Section B ---
class TariffItem(CamelModel):
	name: str
	cost: float
	notes: str


class TariffCost(CamelModel):
	total_tariff_cost: float
	breakdown: List[TariffItem] = []
	storage_free_days: int  # free period the penalty was priced with


class DutyCost(CamelModel):
	duty_cost: float
	duty_notes: str


# --- Section C ---
class TaxCost(CamelModel):
	vat_cost: float
	wht_cost: float
	total_tax: float


class OptimizationInfo(CamelModel):
	original_distance: float
	actual_distance: float
	notes: str
	num_stops: int
	applied: bool = False


class CalculationResult(CamelModel):
	total_cost: float  # full precision, round only for display
	transport: TransportCost
	tariffs: TariffCost
	duty: DutyCost
	tariff_subtotal: float  # tariffs + customs duty
	tax: TaxCost
	rates: ShipmentInput  # input echoed back for the report
	optimization: OptimizationInfo
	is_export: bool
	currency: str = "ETB"

	@computed_field(alias="totalOptimizedCost")
	@property
	def total_optimized_cost(self) -> str:
		return format_etb(self.total_cost)
