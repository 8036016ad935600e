# app/schemas/report.py
from typing import List
from pydantic import BaseModel


class ReportRow(BaseModel):
	label: str
	amount: float
	formatted: str
	is_sub: bool = True


class ReportSection(BaseModel):
	title: str
	subtotal: float
	formatted_subtotal: str
	rows: List[ReportRow] = []


class CostReport(BaseModel):
	title: str
	route_summary: str
	sections: List[ReportSection]
	total_label: str
	total_formatted: str
	optimization_note: str
