import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import health, countries, synergy, access
from services import country_service

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="DualPass", version="0.1.0")

app.state.limiter = synergy.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(synergy.router)
app.include_router(access.router)


@app.get("/")
async def root():
    return {
        "name": "DualPass API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/synergy", "/access/combined"],
    }


@app.on_event("startup")
async def startup():
    registry = country_service.get_registry()
    logger.info("DualPass API is running with %d countries", len(registry))
