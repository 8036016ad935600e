import enum
from pydantic import BaseModel, ConfigDict, Field


class TruckType(str, enum.Enum):
	DRY_VAN_40FT = "40FT_DRY_VAN"  # General cargo
	REEFER_40FT = "40FT_REEFER"  # Refrigerated cargo
	FLATBED_15MT = "15MT_FLATBED"  # Non-containerized


class TruckProfile(BaseModel):
	model_config = ConfigDict(frozen=True)

	truck_type: TruckType
	fuel_efficiency_km_l: float = Field(gt=0)  # km driven per liter of fuel
	capacity_teu: int = Field(default=0, ge=0)
	category: str


DEFAULT_TRUCK_PROFILES: dict[TruckType, TruckProfile] = {
	profile.truck_type: profile
	for profile in (
		TruckProfile(
			truck_type=TruckType.DRY_VAN_40FT, fuel_efficiency_km_l=2.78, capacity_teu=2, category="General Cargo"
		),
		TruckProfile(
			truck_type=TruckType.REEFER_40FT, fuel_efficiency_km_l=2.5, capacity_teu=2, category="Refrigerated Cargo"
		),
		TruckProfile(
			truck_type=TruckType.FLATBED_15MT, fuel_efficiency_km_l=3.2, capacity_teu=0, category="Non-Containerized"
		),
	)
}
