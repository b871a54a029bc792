import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .envelope import error_body
from .error import ClientError, ServerError
from .middleware.request_logging import configure_logging, install_request_logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(
        f"Client error: {exc.code} {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=exc.status_code, content=error_body(exc.message)
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.code} ({exc.message})")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error"),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or err['loc'][0]}: {err['msg']}"
        for err in exc.errors()
    )
    logger.warning(f"Validation error: {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(f"Invalid request: {details}"),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    message = "Not Found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code, content=error_body(message), headers=exc.headers
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    # Set by the request logging middleware, which never sees this response
    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error"),
        headers={"X-Request-Id": request_id} if request_id else None,
    )


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title=ApplicationConfig.SERVICE_NAME, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        install_request_logging(app)

    from xenia.api.routes import auth, health_check, invitations, properties, reservations

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(invitations.router, tags=["Invitations"])
    app.include_router(properties.router, tags=["Properties"])
    app.include_router(reservations.router, tags=["Reservations"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
