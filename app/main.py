import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError

from app.api.v1 import auth, bookings, dashboard, motorcycles
from app.config import settings
from app.database import check_db_connection
from app.middleware import error_handler
from app.utils.exceptions import AppException

logging.basicConfig(
    level=logging.DEBUG if settings.APP_DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX  = "/api/v1"


def _register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException,           error_handler.app_exception_handler)
    app.add_exception_handler(RequestValidationError, error_handler.validation_exception_handler)
    app.add_exception_handler(IntegrityError,         error_handler.integrity_error_handler)
    app.add_exception_handler(Exception,              error_handler.generic_exception_handler)


def _register_routers(app: FastAPI) -> None:
    # Public: catalog, booked dates, booking request. Everything else is admin-only.
    for router, tag in (
        (auth.router,        "Auth"),
        (motorcycles.router, "Motorcycles"),
        (bookings.router,    "Bookings"),
        (dashboard.router,   "Dashboard"),
    ):
        app.include_router(router, prefix=API_PREFIX, tags=[tag])


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=API_VERSION,
        description="Motorcycle rental catalog, booking requests and admin back-office",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)
    _register_routers(app)

    @app.on_event("startup")
    def verify_database():
        if check_db_connection():
            logger.info(f"{settings.APP_NAME} started ({settings.APP_ENV}), database reachable")
        else:
            logger.error("Database unreachable at startup")

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "app": settings.APP_NAME, "version": API_VERSION}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT,
                reload=settings.is_development)
