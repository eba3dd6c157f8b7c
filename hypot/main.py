import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from hypot.core.config import Settings, get_settings
from hypot.core.errors import ErrorCode
from hypot.core.results import Result
from hypot.models.database import Database
from hypot.routers import auth, properties

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None, database: Database = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    if database is None:
        database = Database(settings.database_url)
    database.create_all()

    app = FastAPI(title="hypot")
    app.state.settings = settings
    app.state.database = database

    # include our routers
    app.include_router(auth.router)
    app.include_router(properties.router)

    # malformed requests still get the envelope, never a bare 422
    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=200, content=Result.fail(ErrorCode.INTERNAL).envelope())

    @app.get("/api/ping", response_class=PlainTextResponse)
    def ping():
        return "pong"

    return app
