"""
Fitness Coach API - Main Application
FastAPI backend exposing calorie, diet and workout planners to a chat agent
and as a direct HTTP API.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import schemas
from .config import settings
from .errors import FitCoachError, UnknownError
from .llm.agents import list_agents
from .routers import agents, chat, tools
from .utils import utc_timestamp
from .validation import describe_errors

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("=" * 60)
    logger.info(f"{settings.app_name} v{settings.app_version}")
    if settings.git_commit:
        logger.info(f"Git Commit: {settings.git_commit[:8]}")
    if settings.build_date:
        logger.info(f"Build Date: {settings.build_date}")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set; /api/chat will fail until it is configured")
    logger.info("=" * 60)
    yield


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Calorie, diet and workout planning for a fitness coaching agent",
    lifespan=lifespan,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc
)


def error_response(status_code: int, body: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(FitCoachError)
async def fitcoach_error_handler(request: Request, exc: FitCoachError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, {"error": describe_errors(exc) or "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods are both reported as Not Found
    if exc.status_code in (404, 405):
        return error_response(404, {"error": "Not Found"})
    return error_response(exc.status_code, {"error": str(exc.detail)})


@app.middleware("http")
async def cors_and_errors(request: Request, call_next):
    """Answer preflights, convert uncaught faults to 500 and stamp CORS headers."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers={
            "Access-Control-Allow-Origin": settings.cors_allow_origin,
            "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
            "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        })
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        err = UnknownError(str(e) or "Unknown error")
        response = error_response(err.status_code, err.to_dict())
    response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
    return response


# Include routers
app.include_router(chat.router)
app.include_router(agents.router)
app.include_router(tools.router)


@app.get("/")
def root():
    """Root endpoint - API status."""
    response = {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs"
    }
    if settings.git_commit:
        response["git_commit"] = settings.git_commit[:8]
    if settings.build_date:
        response["build_date"] = settings.build_date
    return response


@app.get("/health", response_model=schemas.HealthResponse)
def health_check():
    """Liveness check with the agent roster."""
    return schemas.HealthResponse(
        status="ok",
        timestamp=utc_timestamp(),
        message=f"{settings.app_name} is running",
        agents=list_agents(),
    )


def run():
    import uvicorn
    uvicorn.run("fitcoach.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
