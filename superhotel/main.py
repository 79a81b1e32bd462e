import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .db import create_schema, engine
from .exceptions import EntityNotFoundError, InvalidEntityError, ServiceFailure, ValidationError
from .routers import accommodations_api, guests_api, rooms_api

# --- Logging configuration ---
_level = logging.DEBUG if getattr(settings, "DEBUG", False) else logging.INFO
logging.basicConfig(
    level=_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# Align uvicorn loggers with our level
for _name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(_name).setLevel(_level)
logger = logging.getLogger("superhotel.startup")
logger.info("Starting %s (DEBUG=%s)", settings.APP_NAME, getattr(settings, "DEBUG", False))

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    description=f"{settings.APP_NAME}: guests, rooms and their accommodations.",
)

@app.on_event("startup")
def startup_event():
    """Runs startup tasks, like ensuring the tables exist."""
    logger.info("Running startup tasks...")
    if settings.CREATE_SCHEMA_ON_STARTUP:
        create_schema(engine)
    logger.info("Startup tasks complete.")


# ==== Error mapping ====

@app.exception_handler(ValidationError)
def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})

@app.exception_handler(InvalidEntityError)
def invalid_entity_handler(request: Request, exc: InvalidEntityError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(EntityNotFoundError)
def not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

@app.exception_handler(ServiceFailure)
def service_failure_handler(request: Request, exc: ServiceFailure):
    logger.error("Request %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


app.include_router(guests_api.router)
app.include_router(rooms_api.router)
app.include_router(accommodations_api.router)

@app.get("/healthz")
def healthz():
    return {"status": "ok"}
