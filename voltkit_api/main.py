"""VoltKit API — FastAPI application entry point."""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voltkit import __version__
from voltkit_api.middleware.rate_limit import RateLimitMiddleware
from voltkit_api.routes import battery, circuits, color_code, combination, units

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


app = FastAPI(
    title="VoltKit API",
    description="Electronics calculators with step-by-step derivations",
    version=__version__,
)

# CORS: configured frontend plus any localhost port
_frontend_url = os.getenv("FRONTEND_URL")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[_frontend_url] if _frontend_url else [],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    RateLimitMiddleware,
    requests_per_minute=int(os.getenv("RATE_LIMIT_PER_MINUTE", "120")),
)

# Register route modules
app.include_router(units.router, prefix="/api", tags=["Units"])
app.include_router(combination.router, prefix="/api", tags=["Combination"])
app.include_router(circuits.router, prefix="/api", tags=["Circuits"])
app.include_router(battery.router, prefix="/api", tags=["Battery"])
app.include_router(color_code.router, prefix="/api", tags=["Color Code"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "voltkit-api", "version": __version__}
