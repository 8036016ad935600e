from pydantic import BaseModel, ConfigDict, Field

from app.core.exceptions import UnknownTruckType
from app.models.tariffs import FlatPerContainer, FlatPerShipment, PerDayAfterFreePeriod, TariffRule
from app.models.trucks import DEFAULT_TRUCK_PROFILES, TruckProfile, TruckType


class RateTable(BaseModel):
	"""
	Fixed business rules of the engine.

	Built once per process (see app.core.dependencies) and never mutated;
	pass an alternate instance to ShipmentCostCalculator to price with other rates.
	"""
	model_config = ConfigDict(frozen=True)

	currency: str = "ETB"
	export_discount_factor: float = Field(default=0.60, ge=0, le=1)
	optimization_discount: float = Field(default=0.10, ge=0, le=1)
	optimization_min_stops: int = Field(default=3, ge=1)
	storage_penalty_rate: float = Field(default=192.00, ge=0)
	storage_free_days: int = Field(default=8, ge=0)
	trucks: dict[TruckType, TruckProfile] = Field(default_factory=lambda: dict(DEFAULT_TRUCK_PROFILES))

	def get_truck_profile(self, truck_type: TruckType | str) -> TruckProfile:
		try:
			key = TruckType(truck_type)
		except ValueError:
			raise UnknownTruckType(truck_type) from None

		profile = self.trucks.get(key)
		if profile is None:
			raise UnknownTruckType(key.value)
		return profile

	def tariff_schedule(self, handling_cost: float, inspection_fee: float) -> list[TariffRule]:
		"""Ordered tariff rules; order only matters for the breakdown display."""
		return [
			FlatPerContainer(
				name="Dry Port Handling (40ft)",
				rate_birr=handling_cost,
				is_export_eligible=True,
			),
			FlatPerShipment(
				name="Customs Inspection Fee (Fixed)",
				rate_birr=inspection_fee,
				is_export_eligible=False,
			),
			PerDayAfterFreePeriod(
				name=f"Storage Penalty (40ft, per day after {self.storage_free_days} days)",
				rate_birr=self.storage_penalty_rate,
				free_days=self.storage_free_days,
				is_export_eligible=False,
			),
		]
