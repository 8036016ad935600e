from .calculation import (ShipmentInput, CalculationResult, TransportCost, TariffCost, TariffItem, DutyCost, TaxCost,
                          OptimizationInfo)
from .report import CostReport, ReportSection, ReportRow
from .rates import RateTableRead

__all__ = ["ShipmentInput", "CalculationResult", "TransportCost", "TariffCost", "TariffItem", "DutyCost", "TaxCost",
           "OptimizationInfo", 'CostReport', 'ReportSection', 'ReportRow', 'RateTableRead']
