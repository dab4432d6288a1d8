import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from app.api.routes.parse import router as parse_router
from app.core.config import LOG_LEVEL, SERVICE_NAME, SERVICE_VERSION

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(
    title="Resume Project Parser",
    description="Heuristic resume parsing service that extracts sections, projects and technologies from resume text",
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": SERVICE_NAME, "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Resume Project Parser API",
        version=SERVICE_VERSION,
        description="Resume parsing API: sections, projects and technology keywords",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
