# app/core/dependencies.py
from functools import lru_cache

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.models.rate_table import RateTable
from app.models.trucks import DEFAULT_TRUCK_PROFILES
from app.services.calculator import ShipmentCostCalculator
from app.services.importers.import_trucks import import_truck_profiles


def load_rate_table(settings: Settings) -> RateTable:
	"""Builds the immutable rate table from settings (and the optional truck CSV)."""
	trucks = DEFAULT_TRUCK_PROFILES
	if settings.TRUCK_PROFILES_CSV is not None:
		trucks = import_truck_profiles(settings.TRUCK_PROFILES_CSV)

	return RateTable(
		currency=settings.CURRENCY,
		export_discount_factor=settings.EXPORT_DISCOUNT_FACTOR,
		optimization_discount=settings.OPTIMIZATION_DISCOUNT,
		optimization_min_stops=settings.OPTIMIZATION_MIN_STOPS,
		storage_penalty_rate=settings.STORAGE_PENALTY_RATE,
		storage_free_days=settings.STORAGE_FREE_DAYS,
		trucks=dict(trucks),
	)


@lru_cache
def get_rate_table() -> RateTable:
	"""Process-wide rate table, built on first use."""
	return load_rate_table(get_settings())


def get_calculator(rate_table: RateTable = Depends(get_rate_table)) -> ShipmentCostCalculator:
	return ShipmentCostCalculator(rate_table)
