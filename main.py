"""
Main FastAPI application entry point.
"""
import uvicorn
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from routers import timetable
from config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format=settings.log_format
)
logger = logging.getLogger(__name__)

# Initialize the FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Generates academic timetables: expands courses into sessions, assigns faculty, rooms and weekly slots, and reports conflicts.",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _field_label(loc) -> str:
    """Turn an error location like ("body", "grid", "time_slots", 0) into "Grid -> Time Slots -> 0"."""
    if len(loc) > 1 and loc[0] == "body":
        loc = loc[1:]
    return " -> ".join(str(part) for part in loc).replace("_", " ").title()


# Validation errors are reported as {"errors": {"Field": ["message", ...]}}
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert request validation errors to a per-field message map."""
    errors = {}

    for error in exc.errors():
        field_name = _field_label(error.get("loc", []))
        error_msg = error.get("msg", "Invalid value")
        error_type = error.get("type", "")

        if error_type == "missing":
            error_msg = f"{field_name} is required."
        elif error_type == "literal_error":
            error_msg = f"{field_name} must be one of the allowed values. {error_msg}"
        elif error_type.endswith("_type") or error_type.endswith("_parsing"):
            error_msg = f"{field_name} has an invalid type. {error_msg}"
        else:
            error_msg = f"{field_name}: {error_msg}"

        errors.setdefault(field_name, []).append(error_msg)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": errors}
    )

# Include routers
app.include_router(timetable.router, prefix="/api/v1", tags=["timetable"])

@app.get("/", tags=["health"])
async def root():
    """Root endpoint - API health check."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "healthy",
        "docs": "/docs"
    }

@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}

if __name__ == "__main__":
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload
    )
