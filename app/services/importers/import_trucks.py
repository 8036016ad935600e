import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from app.core.exceptions import RateTableError
from app.models.trucks import TruckProfile, TruckType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["truck_type", "fuel_efficiency_km_l", "capacity_teu", "category"]


def import_truck_profiles(csv_path: Path | str) -> dict[TruckType, TruckProfile]:
	"""
	Reads truck profiles from CSV (truck_type,fuel_efficiency_km_l,capacity_teu,category).
	The returned mapping replaces the built-in profiles entirely.
	"""
	csv_path = Path(csv_path)
	logger.info(f"Loading truck profiles from {csv_path}")

	try:
		df = pd.read_csv(csv_path)
	except FileNotFoundError as e:
		raise RateTableError(f"Truck profile file not found: {csv_path}") from e
	except pd.errors.EmptyDataError as e:
		raise RateTableError(f"Truck profile file is empty: {csv_path}") from e

	missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
	if missing:
		raise RateTableError(f"Truck profile file {csv_path.name} is missing columns: {', '.join(missing)}")

	df["truck_type"] = df["truck_type"].astype(str).str.strip()
	df["capacity_teu"] = df["capacity_teu"].fillna(0)

	profiles = {}
	for index, row in df.iterrows():
		try:
			profile = TruckProfile(
				truck_type=row["truck_type"],
				fuel_efficiency_km_l=float(row["fuel_efficiency_km_l"]),
				capacity_teu=row["capacity_teu"],
				category=str(row["category"]).strip(),
			)
		except (ValidationError, ValueError) as e:
			# +2: header line and 1-based numbering
			raise RateTableError(f"Bad truck profile on line {index + 2} of {csv_path.name}: {e}") from e

		if profile.truck_type in profiles:
			raise RateTableError(f"Duplicate truck type {profile.truck_type.value} in {csv_path.name}")
		profiles[profile.truck_type] = profile

	if not profiles:
		raise RateTableError(f"No truck profiles in {csv_path.name}")

	logger.info(f"Loaded {len(profiles)} truck profiles")
	return profiles
