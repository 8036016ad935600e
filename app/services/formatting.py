# app/services/formatting.py
import math
from decimal import Decimal, ROUND_HALF_UP


def to_fixed(value: float, digits: int = 2) -> str:
	"""450.0 -> '450.00'. Half away from zero on the exact float, no separators."""
	quantum = Decimal(1).scaleb(-digits)
	return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):.{digits}f}"


def format_etb(amount) -> str:
	"""
	Money for display: 2 decimals, comma thousands separator (38992.805 -> '38,992.81').
	Rounds half away from zero on the exact float value; non-numbers and NaN give '0.00'.
	"""
	if isinstance(amount, bool) or not isinstance(amount, (int, float)) or math.isnan(amount):
		return "0.00"
	if math.isinf(amount):
		return "Infinity" if amount > 0 else "-Infinity"

	value = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
	return f"{value:,.2f}"


def format_number(value) -> str:
	"""Plain number for notes: 500.0 -> '500', 500.5 -> '500.5'."""
	if isinstance(value, float):
		if value.is_integer():
			return str(int(value))
		return repr(value)
	return str(value)


def format_percent(factor: float) -> str:
	"""Share as a percent: 0.6 -> '60', 0.07 -> '7' (drops the float noise of factor * 100)."""
	return format_number(round(factor * 100, 10))
