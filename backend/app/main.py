# Pathway CRM backend entrypoint: FastAPI app, routers and error mapping.

import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.api import activities
from backend.app.api import admissions
from backend.app.api import applications
from backend.app.api import dashboard
from backend.app.api import dropdowns
from backend.app.api import events
from backend.app.api import follow_ups
from backend.app.api import leads
from backend.app.api import login
from backend.app.api import register
from backend.app.api import reports
from backend.app.api import search
from backend.app.api import students
from backend.app.api import universities
from backend.app.api import uploads
from backend.app.api import users
from backend.app.core.dev_seed import ensure_default_dev_users, ensure_default_dropdowns
from backend.app.core.exceptions import AccessDeniedError, ServiceError
from backend.app.core.logging import configure_logging
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (
    login,
    register,
    users,
    leads,
    students,
    applications,
    admissions,
    activities,
    search,
    dropdowns,
    universities,
    events,
    follow_ups,
    dashboard,
    reports,
    uploads,
):
    app.include_router(module.router, prefix="/api")

os.makedirs(settings.upload_dir, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if isinstance(exc, AccessDeniedError):
        logger.info(
            "Access denied: user %s requested record %s at %s", exc.user_id, exc.record_id, request.url.path
        )
    elif exc.status_code >= 500:
        logger.error("Service error at %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error at %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@app.get("/")
def read_root():
    return {"app": "Pathway CRM backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def seed_development_data():
    db = SessionLocal()
    try:
        ensure_default_dev_users(db)
        ensure_default_dropdowns(db)
    finally:
        db.close()
