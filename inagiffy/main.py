## Main application entry point
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from inagiffy.errors import InagiffyError, RequestValidationFailure
from inagiffy.roadmaps.routes import router as roadmaps_router
from inagiffy.roadmaps.validation import format_validation_errors
from inagiffy.settings import settings

BASE_DIR = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Inagiffy")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {"api_url": settings.API_URL.rstrip("/")})


@app.get("/health")
async def health():
    return {"status": "ok", "message": "Inagiffy API is running"}


@app.exception_handler(RequestValidationFailure)
async def request_validation_failure_handler(request: Request, exc: RequestValidationFailure):
    return JSONResponse({"error": exc.error, "details": exc.details}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError):
    # e.g. a body that is not JSON at all
    details = format_validation_errors(list(exc.errors()))
    return JSONResponse({"error": "Invalid request", "details": details}, status_code=400)


@app.exception_handler(InagiffyError)
async def inagiffy_error_handler(request: Request, exc: InagiffyError):
    if exc.status_code >= 500:
        logger.error("Error generating map: %s: %s", type(exc).__name__, exc.message)
    return JSONResponse({"error": exc.error, "message": exc.message}, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            {"error": "Not Found", "message": f"Route {request.method} {request.url.path} not found"},
            status_code=404,
        )
    return JSONResponse(
        {"error": str(exc.detail), "message": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        {"error": "Failed to generate learning map", "message": str(exc) or "An unexpected error occurred"},
        status_code=500,
    )


app.include_router(roadmaps_router)


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
