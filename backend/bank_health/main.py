import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bank_health.api.endpoints import banks
from bank_health.config import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="Bank Health API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(banks.router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "BankHealth"}
