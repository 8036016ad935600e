# app/api/v1/endpoints/trucks.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_rate_table
from app.core.exceptions import UnknownTruckType
from app.models.rate_table import RateTable
from app.models.trucks import TruckProfile

router = APIRouter()


@router.get("/trucks", response_model=List[TruckProfile])
def get_trucks(rate_table: RateTable = Depends(get_rate_table)):
    """
    Returns every configured truck profile.
    """
    return list(rate_table.trucks.values())


@router.get("/trucks/{truck_type}", response_model=TruckProfile)
def get_truck(truck_type: str, rate_table: RateTable = Depends(get_rate_table)):
    try:
        return rate_table.get_truck_profile(truck_type)
    except UnknownTruckType as e:
        raise HTTPException(status_code=404, detail=str(e))
