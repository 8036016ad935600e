import re
from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# Enum-like literals for the tariff UNIT (discriminator of TariffRule)
PER_CONTAINER = "per_container"
PER_SHIPMENT = "per_shipment"
PER_DAY_AFTER_FREE_PERIOD = "per_day_after_free_period"

_QUALIFIER_RE = re.compile(r"\s*\(.*\)")


class TariffRuleBase(BaseModel, ABC):
	model_config = ConfigDict(frozen=True)

	name: str
	rate_birr: float = 0.0
	is_export_eligible: bool = False

	@property
	def display_name(self) -> str:
		"""'Dry Port Handling (40ft)' -> 'Dry Port Handling'"""
		return _QUALIFIER_RE.sub("", self.name, count=1)

	@abstractmethod
	def evaluate(self, estimated_days: int) -> tuple[float, str]:
		"""Returns (base cost before any export discount, note)."""


class FlatPerContainer(TariffRuleBase):
	unit: Literal["per_container"] = PER_CONTAINER

	def evaluate(self, estimated_days: int) -> tuple[float, str]:
		return self.rate_birr, "Base rate for 1 container."


class FlatPerShipment(TariffRuleBase):
	unit: Literal["per_shipment"] = PER_SHIPMENT

	def evaluate(self, estimated_days: int) -> tuple[float, str]:
		return self.rate_birr, "Fixed mandatory fee."


class PerDayAfterFreePeriod(TariffRuleBase):
	unit: Literal["per_day_after_free_period"] = PER_DAY_AFTER_FREE_PERIOD
	free_days: int = Field(default=0, ge=0)

	def days_over(self, estimated_days: int) -> int:
		return max(0, estimated_days - self.free_days)

	def evaluate(self, estimated_days: int) -> tuple[float, str]:
		days_over = self.days_over(estimated_days)
		if days_over > 0:
			note = f"Penalty applied for {days_over} days over the {self.free_days}-day free period."
			return days_over * self.rate_birr, note
		return 0.0, "No penalty: Trip completed within the free period."


TariffRule = Annotated[
	Union[FlatPerContainer, FlatPerShipment, PerDayAfterFreePeriod],
	Field(discriminator="unit"),
]
