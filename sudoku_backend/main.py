"""Main FastAPI application for Sudoku Solver."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import router
from .config import Settings, configure_logging

_LOGGER = logging.getLogger(__name__)

settings = Settings.from_env()


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Configure logging from the environment before serving requests."""
    configure_logging(settings.log_level)
    _LOGGER.info(
        "Sudoku Solver API %s starting (log_level=%s)",
        __version__,
        settings.log_level,
    )
    yield
    _LOGGER.info("Sudoku Solver API stopped")


app = FastAPI(
    title="Sudoku Solver API",
    description="API for solving Sudoku puzzles by backtracking search",
    version=__version__,
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudoku_backend.main:app", host=settings.host, port=settings.port)
