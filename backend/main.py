"""
pgshape — PostgreSQL schema introspection service
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import health, structure
from config import settings
from core.db_connector import build_engine

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("pgshape")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("pgshape starting up…")
    app.state.engine = build_engine(settings)
    yield
    app.state.engine.dispose()
    logger.info("pgshape shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="pgshape — PostgreSQL schema introspection",
    description="Read-only description of tables, columns, keys and enum types.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router,    prefix="/api")
app.include_router(structure.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.API_HOST, port=settings.API_PORT)
