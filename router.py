"""
FastAPI integration: path-parameter resolution and error translation.

Usage:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/users/{record_id}")
    async def show_user(user_id: int = Depends(obfuscated_id(USER_CONFIG))):
        ...
"""
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from config import logger
from core_logic import deobfuscate_id
from errors import NonObfuscatedIdError, RecordNotFoundError
from models import TypeConfig


def obfuscated_id(config: TypeConfig, param: str = "record_id") -> Callable[[Request], int]:
    """Builds a dependency that resolves the named path parameter to an integer ID."""

    def dependency(request: Request) -> int:
        return deobfuscate_id(request.path_params[param], config)

    return dependency


async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Resource not found"})


async def non_obfuscated_id_handler(request: Request, exc: NonObfuscatedIdError) -> JSONResponse:
    logger.warning(f"Non-obfuscated ID rejected on {request.url.path}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordNotFoundError, record_not_found_handler)
    app.add_exception_handler(NonObfuscatedIdError, non_obfuscated_id_handler)
