from typing import Any, Mapping

from pydantic import ValidationError

from app.core.exceptions import InvalidInput
from app.models.rate_table import RateTable
from app.models.trucks import TruckType
from app.schemas.calculation import (
	CalculationResult,
	DutyCost,
	OptimizationInfo,
	ShipmentInput,
	TariffCost,
	TariffItem,
	TaxCost,
	TransportCost,
)
from app.services.formatting import format_etb, format_number, format_percent, to_fixed


def parse_shipment(data: Mapping[str, Any]) -> ShipmentInput:
	"""Validates raw form/JSON data (camelCase or snake_case keys)."""
	try:
		return ShipmentInput.model_validate(data)
	except ValidationError as e:
		raise InvalidInput(e.errors(include_url=False)) from e


class ShipmentCostCalculator:
	"""
	Prices one shipment: transport (A), tariffs + customs duty (B), taxes on A (C).

	Every method is a pure function of its arguments and the rate table.
	Errors (e.g. UnknownTruckType) are not caught here.
	"""

	def __init__(self, rate_table: RateTable | None = None):
		self.rate_table = rate_table if rate_table is not None else RateTable()

	def optimize_route(self, distance_km: float, num_stops: int) -> OptimizationInfo:
		discount = self.rate_table.optimization_discount

		if num_stops >= self.rate_table.optimization_min_stops:
			actual_distance = distance_km * (1 - discount)
			notes = (
				f"Route Optimization Applied: Distance reduced by {format_percent(discount)}% "
				f"(from {format_number(distance_km)} KM to {to_fixed(actual_distance)} KM) "
				f"for {num_stops} delivery stops."
			)
			applied = True
		else:
			actual_distance = distance_km
			notes = "No Route Optimization Applied."
			applied = False

		return OptimizationInfo(
			original_distance=distance_km,
			actual_distance=actual_distance,
			notes=notes,
			num_stops=num_stops,
			applied=applied,
		)

	def calculate_transport_cost(self, distance_km: float, truck_type: TruckType | str, estimated_days: int,
	                             driver_daily_wage: float, fuel_price: float,
	                             truck_rental_cost: float) -> TransportCost:
		truck = self.rate_table.get_truck_profile(truck_type)
		# At least one day is always charged
		days_to_charge = max(1, estimated_days)

		total_liters = distance_km / truck.fuel_efficiency_km_l
		fuel_cost = total_liters * fuel_price
		driver_cost = days_to_charge * driver_daily_wage
		truck_rent = days_to_charge * truck_rental_cost

		return TransportCost(
			fuel_cost=fuel_cost,
			driver_cost=driver_cost,
			truck_rent=truck_rent,
			total_transport_cost=fuel_cost + driver_cost + truck_rent,
			total_liters_used=total_liters,
			billable_days=days_to_charge,
		)

	def calculate_tariff_cost(self, estimated_days: int, is_export: bool,
	                          handling_cost: float, inspection_fee: float) -> TariffCost:
		factor = self.rate_table.export_discount_factor
		discount_multiplier = (1 - factor) if is_export else 1

		total_tariff_cost = 0.0
		breakdown = []

		for tariff in self.rate_table.tariff_schedule(handling_cost, inspection_fee):
			cost, notes = tariff.evaluate(estimated_days)

			final_cost = cost
			if is_export and tariff.is_export_eligible:
				final_cost = cost * discount_multiplier
				notes += f" EXPORT DISCOUNT Applied ({format_percent(factor)}% off eligible items)."

			# A zero-cost rule with a configured rate is still reported
			if final_cost > 0 or tariff.rate_birr > 0:
				total_tariff_cost += final_cost
				breakdown.append(TariffItem(name=tariff.display_name, cost=final_cost, notes=notes))

		return TariffCost(
			total_tariff_cost=total_tariff_cost,
			breakdown=breakdown,
			storage_free_days=self.rate_table.storage_free_days,
		)

	def calculate_customs_duty(self, cif_value: float, customs_duty_rate: float, is_export: bool) -> DutyCost:
		if is_export or customs_duty_rate <= 0:
			return DutyCost(duty_cost=0.0, duty_notes="Customs Duty applies only to Import/Local cargo.")

		duty_cost = cif_value * (customs_duty_rate / 100)
		notes = (
			f"Calculated on CIF Value ({format_etb(cif_value)} {self.rate_table.currency}) "
			f"at {format_number(customs_duty_rate)}%."
		)
		return DutyCost(duty_cost=duty_cost, duty_notes=notes)

	def calculate_tax_cost(self, transport_subtotal: float, vat_rate: float, wht_rate: float) -> TaxCost:
		# Only the transport subtotal is taxed; tariffs and duty stay out of the base
		vat_cost = transport_subtotal * (vat_rate / 100)
		wht_cost = transport_subtotal * (wht_rate / 100)
		return TaxCost(vat_cost=vat_cost, wht_cost=wht_cost, total_tax=vat_cost + wht_cost)

	def calculate(self, shipment: ShipmentInput) -> CalculationResult:
		"""
		Main calculation:
		1. Route optimization (3+ stops shorten the distance)
		2. Transport on the optimized distance, tariffs on planned days, customs duty
		3. Taxes on the transport subtotal
		4. Total = A + B + C
		"""
		# 1. Route optimization
		optimization = self.optimize_route(shipment.distance_km, shipment.num_stops)

		# 2. Transport, tariffs, duty
		transport = self.calculate_transport_cost(
			optimization.actual_distance,
			shipment.truck_type,
			shipment.estimated_days,
			shipment.driver_cost,
			shipment.fuel_price,
			shipment.truck_rental_cost,
		)
		tariffs = self.calculate_tariff_cost(
			shipment.estimated_days, shipment.is_export, shipment.handling_cost, shipment.inspection_fee
		)
		duty = self.calculate_customs_duty(shipment.cif_value, shipment.customs_duty_rate, shipment.is_export)

		transport_subtotal = transport.total_transport_cost
		tariff_subtotal = tariffs.total_tariff_cost + duty.duty_cost

		# 3. Taxes
		tax = self.calculate_tax_cost(transport_subtotal, shipment.vat_rate, shipment.wht_rate)

		# 4. Total
		total_cost = transport_subtotal + tariff_subtotal + tax.total_tax

		return CalculationResult(
			total_cost=total_cost,
			transport=transport,
			tariffs=tariffs,
			duty=duty,
			tariff_subtotal=tariff_subtotal,
			tax=tax,
			rates=shipment,
			optimization=optimization,
			is_export=shipment.is_export,
			currency=self.rate_table.currency,
		)
