"""
Winestock Application Factory
=============================

Assembles the FastAPI application using the Application Factory Pattern.
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import time
import uuid

from .routes import customer_router, user_router, wine_router
from .services.exceptions import ValidationError, NotFoundError, ConflictError
from .responses import APIResponse
from .logging_config import setup_logging
from .config import settings

logger = logging.getLogger(__name__)

def setup_middleware(app: FastAPI):
    """Setup all application middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS
    )

    @app.middleware("http")
    async def add_request_id_and_process_time(request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.time()

        request.state.request_id = request_id
        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id
        return response

def setup_exception_handlers(app: FastAPI):
    """Translate domain exceptions into HTTP responses."""
    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                            content=APIResponse.error(exc.message, exc.error_code, exc.details))

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND,
                            content=APIResponse.error(exc.message, exc.error_code, exc.details))

    @app.exception_handler(ConflictError)
    async def conflict_exception_handler(request: Request, exc: ConflictError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT,
                            content=APIResponse.error(exc.message, exc.error_code, exc.details))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content=APIResponse.error("An unexpected error occurred", "INTERNAL_ERROR"))

def setup_routes(app: FastAPI):
    """Register all routers."""
    @app.get("/health", tags=["System"])
    async def health_check():
        return {"status": "healthy", "timestamp": time.time()}

    @app.get("/", tags=["System"])
    async def root():
        return {"message": "Winestock API", "version": "1.0.0", "docs": "/docs"}

    app.include_router(customer_router, prefix="/api/customers", tags=["Customers"])
    app.include_router(user_router, prefix="/api/users", tags=["Users"])
    app.include_router(wine_router, prefix="/api/wines", tags=["Wines"])

def create_app() -> FastAPI:
    """
    Application Factory: build and configure the FastAPI instance.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Winestock API starting up")
        yield
        logger.info("Winestock API shutting down")

    # 1. Create the FastAPI instance
    app = FastAPI(
        title="Winestock API",
        description="Customers, users and wine consignment management",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # 2. Middleware
    setup_middleware(app)

    # 3. Exception handlers
    setup_exception_handlers(app)

    # 4. Routes
    setup_routes(app)

    logger.info("FastAPI app created and configured")
    return app
