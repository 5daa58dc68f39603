# cruise_booking/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cruise_booking import errors
from cruise_booking.config import settings
from cruise_booking.routes import bookings, cruises, users
from cruise_booking.seed import seed_sample_data
from cruise_booking.store import EntityStore, build_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# request-validation messages by path prefix
VALIDATION_MESSAGES = [
    ("/api/cruises", "Invalid cruise data"),
    ("/api/calculate-price", "Invalid booking data"),
    ("/api/bookings", "Invalid booking data"),
]


def validation_message(path: str) -> str:
    for prefix, message in VALIDATION_MESSAGES:
        if path.startswith(prefix):
            return message
    return errors.ValidationError.default_message


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(errors.ServiceError)
    async def service_error_handler(request: Request, exc: errors.ServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # 400 with a field list instead of FastAPI's default 422
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = errors.ValidationError(validation_message(request.url.path), errors.field_errors(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=errors.InternalError().to_dict(),
        )


def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    """Build the API around ``store``; without one, use the configured backend (seeded if enabled)."""
    if store is None:
        store = build_store(settings)
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(store)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Cruise catalog, booking and back-office API",
        version="1.0.0"
    )
    app.state.store = store

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Registering Routers
    app.include_router(cruises.router)
    app.include_router(bookings.router)
    app.include_router(users.router)

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": f"Welcome to the {settings.APP_NAME}"}

    return app


app = create_app()
