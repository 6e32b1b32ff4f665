# POS backend entrypoint: catalog lookups, the POS page and per-session invoice ledgers.

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pos_backend.app.api import catalog
from pos_backend.app.api import ledgers
from pos_backend.app.api import pos
from pos_backend.app.core.dev_seed import ensure_dev_catalog
from pos_backend.app.core.errors import InvalidArgument, NotFound
from pos_backend.app.core.logging import configure_logging
from pos_backend.app.core.settings import get_settings
from pos_backend.app.db.base import Base
from pos_backend.app.db.session import SessionLocal, engine

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("pos_backend")

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pos.router)
app.include_router(catalog.router)
app.include_router(ledgers.router)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_catalog():
    Base.metadata.create_all(bind=engine)
    if not settings.seed_catalog:
        return
    db = SessionLocal()
    try:
        ensure_dev_catalog(db)
    finally:
        db.close()
