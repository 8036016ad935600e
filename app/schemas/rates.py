# app/schemas/rates.py
from typing import List
from pydantic import BaseModel
from app.models.trucks import TruckProfile


class RateTableBase(BaseModel):
	currency: str
	export_discount_factor: float
	optimization_discount: float
	optimization_min_stops: int
	storage_penalty_rate: float
	storage_free_days: int


class RateTableRead(RateTableBase):
	trucks: List[TruckProfile] = []
