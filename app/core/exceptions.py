# app/core/exceptions.py


class CostEngineError(Exception):
	"""Base class for every error raised by the cost engine."""


class InvalidInput(CostEngineError):
	"""Shipment parameters failed validation (raised before the engine runs)."""

	def __init__(self, errors: list[dict]):
		self.errors = errors
		fields = ", ".join(".".join(str(part) for part in err.get("loc", ())) for err in errors)
		super().__init__(f"Invalid shipment input: {fields or 'unknown field'}")


class UnknownTruckType(CostEngineError, KeyError):
	"""The requested truck type has no profile in the rate table."""

	def __init__(self, truck_type):
		self.truck_type = truck_type
		super().__init__(f"Unknown truck type: {truck_type!r}")

	def __str__(self):
		# KeyError wraps its message in quotes, keep the plain text
		return self.args[0]


class RateTableError(CostEngineError):
	"""Truck profile file is missing columns or holds bad values."""
