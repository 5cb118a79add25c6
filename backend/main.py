"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager
from typing import Tuple

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import health, pages
from app.core.config import get_settings
from app.core.logging_config import LoggingConfig
from app.core.metadata import get_metadata
from app.core.middleware import LoggingContextMiddleware

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


_settings = get_settings()
app = FastAPI(
    title=_settings.app_name,
    description=get_metadata().description,
    version=_settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(LoggingContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount(
    _settings.static_url_path,
    StaticFiles(directory=str(_settings.resolved_static_dir)),
    name="static",
)


def _accept_quality(accept: str) -> Tuple[float, float]:
    """Highest q given to JSON and to HTML media ranges in an Accept header"""
    json_q = html_q = 0.0
    for part in accept.split(","):
        media, _, params = part.partition(";")
        media = media.strip().lower()
        q = 1.0
        for param in params.split(";"):
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    q = float(value)
                except ValueError:
                    q = 0.0
        if media == "application/json" or media.endswith("+json"):
            json_q = max(json_q, q)
        elif media in ("text/html", "text/*", "*/*"):
            html_q = max(html_q, q)
    return json_q, html_q


def wants_html(request: Request) -> bool:
    """Browsers get HTML error pages, API clients keep JSON"""
    if request.url.path.startswith("/api"):
        return False
    json_q, html_q = _accept_quality(request.headers.get("accept", "*/*"))
    # Ties go to HTML
    return not (json_q > 0 and json_q > html_q)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render 404s inside the root layout for HTML clients"""
    if exc.status_code == 404 and wants_html(request):
        logger.info("Page not found", extra={"path": request.url.path})
        return pages.render_not_found(request)
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to log all unhandled errors"""
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        }
    )

    # Error text stays in the logs outside development
    if get_settings().app_env == "development":
        content = {"detail": str(exc), "type": type(exc).__name__}
    else:
        content = {"detail": "Internal Server Error"}

    return JSONResponse(status_code=500, content=content)


# Include routers
app.include_router(pages.router)
app.include_router(health.router)


@app.get("/api")
async def root():
    """Root API endpoint"""
    settings = get_settings()
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "environment": settings.app_env,
    }


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.app_env == "development",
    )
