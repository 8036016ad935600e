# app/models/__init__.py
# Static reference data of the engine (rate table, truck profiles, tariff rules)
from .trucks import TruckType, TruckProfile, DEFAULT_TRUCK_PROFILES
from .tariffs import TariffRule, FlatPerContainer, FlatPerShipment, PerDayAfterFreePeriod
from .rate_table import RateTable

__all__ = ["TruckType", "TruckProfile", "DEFAULT_TRUCK_PROFILES", "TariffRule", "FlatPerContainer",
           "FlatPerShipment", "PerDayAfterFreePeriod", "RateTable"]
