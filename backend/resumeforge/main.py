"""
ResumeForge - Main FastAPI application
"""
import os
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import structlog

from resumeforge.core.config import settings
from resumeforge.core.database import init_db
from resumeforge.core.logging_config import configure_logging
from resumeforge.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_body,
)
from resumeforge.core.exceptions import ResumeForgeException
from resumeforge.auth.router import router as auth_router
from resumeforge.resumes.router import router as resumes_router
from resumeforge.ats.router import router as ats_router

# Configure logging
configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Resume builder backend: OTP-verified accounts and resume parsing",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Middleware added last runs first
app.add_middleware(ExceptionHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(ResumeForgeException)
async def resumeforge_exception_handler(request: Request, exc: ResumeForgeException):
    """Handle ResumeForge exceptions"""
    if exc.status_code >= 500:
        logger.error("request_error", path=request.url.path, error=exc.message, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Server is Running",
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


# Include routers
app.include_router(auth_router)
app.include_router(resumes_router)
app.include_router(ats_router)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("application_starting", version=settings.APP_VERSION)

    try:
        init_db()
    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "resumeforge.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
