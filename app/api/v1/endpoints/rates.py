# app/api/v1/endpoints/rates.py
from fastapi import APIRouter, Depends

from app.core.dependencies import get_rate_table
from app.models.rate_table import RateTable
from app.schemas.rates import RateTableRead

router = APIRouter()


@router.get("/rates", response_model=RateTableRead)
def get_rates(rate_table: RateTable = Depends(get_rate_table)):
	"""
	Active pricing rules:
	export discount, route optimization, storage penalty and free period, truck profiles.
	"""
	return RateTableRead(
		**rate_table.model_dump(exclude={"trucks"}),
		trucks=list(rate_table.trucks.values()),
	)
