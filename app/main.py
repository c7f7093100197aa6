import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.database import init_db
from app.core.errors import PageError
from app.core.logging import configure_logging
from app.routers import health, pages

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
init_db()

app = FastAPI(
    title="Page Builder API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(PageError)
async def page_error_handler(request: Request, exc: PageError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error(exc.status_code, exc.public_message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    # ("body", "metadata", "keywords") -> "metadata.keywords", les index et offsets sont ignorés
    field = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    reason = first.get("msg", "invalid request")
    message = f"Validation failed: {field}: {reason}" if field else f"Validation failed: {reason}"
    return _error(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error(exc.status_code, f"Route {request.method} {request.url.path} not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # jamais de détail interne dans la réponse
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(pages.router)
