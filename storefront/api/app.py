import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from storefront.adapter.services.cloudinary_storage import CloudinaryStorage
from storefront.adapter.services.database import Database
from storefront.adapter.services.smtp_mailer import SmtpMailer
from storefront.app.services.mailer import Mailer
from storefront.app.services.object_storage import ObjectStorage
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_integrity_error(request: Request, exc: IntegrityError):
    error_dict = {"code": "CONFLICT", "message": "Database constraint violation"}
    logger.warning(f"Integrity error: {exc.orig}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": error_dict})


def create_app(
    ApplicationConfig,
    database: Optional[Database] = None,
    mailer: Optional[Mailer] = None,
    object_storage: Optional[ObjectStorage] = None,
) -> FastAPI:
    if database is None:
        database = Database(ApplicationConfig.DB_URI)
    if mailer is None:
        mailer = SmtpMailer(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            username=ApplicationConfig.SMTP_USERNAME,
            password=ApplicationConfig.SMTP_PASSWORD,
            use_tls=ApplicationConfig.SMTP_USE_TLS,
            from_name=ApplicationConfig.SMTP_FROM_NAME,
            from_email=ApplicationConfig.SMTP_FROM_EMAIL,
        )
    if object_storage is None:
        object_storage = CloudinaryStorage(
            cloud_name=ApplicationConfig.CLOUDINARY_CLOUD_NAME,
            api_key=ApplicationConfig.CLOUDINARY_API_KEY,
            api_secret=ApplicationConfig.CLOUDINARY_API_SECRET,
            timeout=ApplicationConfig.CLOUDINARY_TIMEOUT_SEC,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.init(create_tables=ApplicationConfig.CREATE_TABLES)
        yield
        await database.close()

    app = FastAPI(title="Storefront API", version="0.1.0", lifespan=lifespan)
    app.state.database = database
    app.state.mailer = mailer
    app.state.object_storage = object_storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    from storefront.api.routes import admin, auth, health_check, orders, products, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(products.router, prefix=prefix, tags=["Products"])
    app.include_router(orders.router, prefix=prefix, tags=["Orders"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)

    return app
