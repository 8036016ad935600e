import logging

from fastapi import FastAPI
from app.api.v1 import api
from app.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
	title=settings.PROJECT_NAME,
	description="Shipment cost engine: transport, tariffs & customs duty, VAT/WHT",
	version=settings.VERSION,
	debug=settings.DEBUG,
)

app.include_router(api.router)


@app.get("/")
async def read_index():
	return {"name": settings.PROJECT_NAME, "version": settings.VERSION}


if __name__ == "__main__":
	import uvicorn

	uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
