"""
Othello backend - FastAPI application

Run with: uvicorn src.api.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import get_settings
from src.core.exceptions import (
    GameError,
    InvalidPositionError,
    InvalidRequestError,
    RepositoryError,
)
from src.db.database import init_db

logger = logging.getLogger(__name__)

# anything else deriving from GameError is a conflict with the state of the game (illegal move, nothing to undo, ...)
ERROR_STATUS_CODES: dict[type[GameError], int] = {
    RepositoryError: 404,
    InvalidRequestError: 422,
    InvalidPositionError: 422,
}


def status_code_for(error: GameError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 409


async def handle_game_error(request: Request, error: GameError) -> JSONResponse:
    status_code = status_code_for(error)
    logger.info(
        "%s %s -> %d %s: %s",
        request.method,
        request.url.path,
        status_code,
        type(error).__name__,
        error,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": type(error).__name__, "detail": str(error)},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Othello backend",
        description="Othello rules engine with undo/redo and a computer opponent",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(GameError, handle_game_error)
    app.include_router(router)
    return app


app = create_app()
