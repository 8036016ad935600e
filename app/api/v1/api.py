from fastapi import APIRouter
from app.api.v1.endpoints import calculator, trucks, rates

router = APIRouter()
router.include_router(calculator.router, prefix="/api/v1", tags=["Calculator"])
router.include_router(trucks.router, prefix="/api/v1", tags=["Trucks"])
router.include_router(rates.router, prefix="/api/v1", tags=["Rates"])
