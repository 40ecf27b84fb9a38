"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from gamehelp.config import settings
from gamehelp.db.redis import close_redis
from gamehelp.log import setup_logging
from gamehelp.services.relay_client import close_relay_client

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting game help chat ({settings.APP_ENV})")
    yield
    # Shutdown: close connections
    await close_relay_client()
    await close_redis()


app = FastAPI(
    title="Game Help Chat API",
    description="Backend for a game-help chat widget scoped to the selected game",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: restrict to the site's origin once it is deployed
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routes ---
from gamehelp.api.routes import games, relay, widget  # noqa: E402

app.include_router(relay.router, prefix="/api/relay", tags=["relay"])
app.include_router(games.router, prefix="/api/games", tags=["games"])
app.include_router(widget.router, prefix="/api/widget", tags=["widget"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run("gamehelp.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
