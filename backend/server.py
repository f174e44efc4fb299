from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from core.config import CORS_ORIGINS, logger
from core.database import client, create_database_indexes
from core.middleware import locale_access_middleware
from routes import (
    health_router, admin_router, albums_router, watermarks_router,
    style_templates_router, translations_router, notifications_router,
    audit_logs_router, backup_router, public_router
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown"""
    try:
        await create_database_indexes()
        logger.info("Database indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating indexes (may already exist): {e}")
    yield
    client.close()


app = FastAPI(title="PIS API", lifespan=lifespan)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.middleware("http")(locale_access_middleware)

for router in (
    health_router, admin_router, albums_router, watermarks_router,
    style_templates_router, translations_router, notifications_router,
    audit_logs_router, backup_router, public_router
):
    app.include_router(router)

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
