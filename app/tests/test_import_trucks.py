import pytest

from app.core.config import Settings
from app.core.dependencies import load_rate_table
from app.core.exceptions import RateTableError
from app.models.trucks import TruckType
from app.services.importers.import_trucks import import_truck_profiles


@pytest.fixture
def trucks_csv(tmp_path):
	path = tmp_path / "trucks.csv"
	path.write_text(
		"truck_type,fuel_efficiency_km_l,capacity_teu,category\n"
		"40FT_DRY_VAN,3.0,2,General Cargo\n"
		" 15MT_FLATBED ,4,,Non-Containerized\n",
		encoding="utf-8",
	)
	return path


def test_import_truck_profiles(trucks_csv):
	profiles = import_truck_profiles(trucks_csv)

	assert set(profiles) == {TruckType.DRY_VAN_40FT, TruckType.FLATBED_15MT}
	assert profiles[TruckType.DRY_VAN_40FT].fuel_efficiency_km_l == 3.0
	assert profiles[TruckType.FLATBED_15MT].capacity_teu == 0
	assert profiles[TruckType.FLATBED_15MT].category == "Non-Containerized"


def test_load_rate_table_from_settings(trucks_csv):
	settings = Settings(TRUCK_PROFILES_CSV=trucks_csv, STORAGE_PENALTY_RATE=250.0, EXPORT_DISCOUNT_FACTOR=0.5)
	table = load_rate_table(settings)

	assert table.storage_penalty_rate == 250.0
	assert table.export_discount_factor == 0.5
	assert TruckType.REEFER_40FT not in table.trucks
	assert table.get_truck_profile("40FT_DRY_VAN").fuel_efficiency_km_l == 3.0


def test_load_rate_table_defaults():
	table = load_rate_table(Settings())
	assert len(table.trucks) == 3
	assert table.get_truck_profile(TruckType.DRY_VAN_40FT).fuel_efficiency_km_l == 2.78


@pytest.mark.parametrize("content", [
	"truck_type,fuel_efficiency_km_l,category\n40FT_DRY_VAN,3.0,General\n",  # missing column
	"truck_type,fuel_efficiency_km_l,capacity_teu,category\n53FT_TRAILER,3.0,2,General\n",  # unknown type
	"truck_type,fuel_efficiency_km_l,capacity_teu,category\n40FT_DRY_VAN,0,2,General\n",  # zero efficiency
	"truck_type,fuel_efficiency_km_l,capacity_teu,category\n40FT_DRY_VAN,2,2,A\n40FT_DRY_VAN,3,2,B\n",  # duplicate
	"truck_type,fuel_efficiency_km_l,capacity_teu,category\n40FT_DRY_VAN,3.0,-1,General\n",  # negative capacity
	"truck_type,fuel_efficiency_km_l,capacity_teu,category\n",  # no rows
	"",
])
def test_import_rejects_bad_files(tmp_path, content):
	path = tmp_path / "trucks.csv"
	path.write_text(content, encoding="utf-8")

	with pytest.raises(RateTableError):
		import_truck_profiles(path)


def test_import_missing_file(tmp_path):
	with pytest.raises(RateTableError):
		import_truck_profiles(tmp_path / "nope.csv")


def test_import_rejects_fractional_capacity(tmp_path):
	"""Capacity is a whole TEU count, 2.5 is not truncated to 2"""
	path = tmp_path / "trucks.csv"
	path.write_text(
		"truck_type,fuel_efficiency_km_l,capacity_teu,category\n"
		"40FT_DRY_VAN,3.0,2,General Cargo\n"
		"40FT_REEFER,2.5,2.5,Refrigerated Cargo\n",
		encoding="utf-8",
	)

	with pytest.raises(RateTableError) as exc_info:
		import_truck_profiles(path)

	assert "line 3" in str(exc_info.value)


def test_settings_declare_only_used_fields():
	assert set(Settings.model_fields) == {
		"PROJECT_NAME", "VERSION", "DEBUG", "LOG_LEVEL", "CURRENCY",
		"EXPORT_DISCOUNT_FACTOR", "OPTIMIZATION_DISCOUNT", "OPTIMIZATION_MIN_STOPS",
		"STORAGE_PENALTY_RATE", "STORAGE_FREE_DAYS", "TRUCK_PROFILES_CSV",
	}
