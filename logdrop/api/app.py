from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger

from logdrop import __version__
from logdrop.api.routes.logs import router as logs_router
from logdrop.domain.errors import ErrorClass, LogdropError
from logdrop.domain.value_objects.storage_config import StorageConfig
from logdrop.infrastructure.service_factory import LogdropServices, create_services

ERROR_STATUS_CODES: dict[ErrorClass, int] = {
    ErrorClass.BAD_REQUEST: 400,
    ErrorClass.NOT_FOUND: 404,
    ErrorClass.SERVER_ERROR: 500,
}


def error_body(message: str, code: str) -> dict[str, str]:
    return {"error": message, "code": code}


def create_app(config: StorageConfig, services: LogdropServices | None = None) -> FastAPI:
    """Build the HTTP API over one storage root."""
    app = FastAPI(title="logdrop", version=__version__)
    app.state.services = services or create_services(config)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(logs_router, prefix="/api/logs", tags=["logs"])

    @app.exception_handler(LogdropError)
    async def logdrop_error_handler(request: Request, exc: LogdropError) -> JSONResponse:
        status_code = ERROR_STATUS_CODES[exc.error_class]
        if status_code >= 500:
            logger.opt(exception=exc).error(
                "Request failed on {} {}", request.method, request.url.path
            )
        return JSONResponse(
            status_code=status_code,
            content=error_body(str(exc), exc.error_class.value),
        )

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
        code = ErrorClass.BAD_REQUEST if exc.status_code < 500 else ErrorClass.SERVER_ERROR
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), code.value),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error(
            "Unhandled exception on {} {}", request.method, request.url.path
        )
        return JSONResponse(
            status_code=500,
            content=error_body("An unexpected error occurred.", ErrorClass.SERVER_ERROR.value),
        )

    logger.info("logdrop API ready (root: {})", config.root)
    return app
