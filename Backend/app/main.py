import logging
import traceback
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.exceptions import CodeDIYError

# Setup Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Repair video search by diagnostic trouble code",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --------------------------------------------------------------------------
# CORS Middleware
# --------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------------------------------------------------
# Database Initialization (Startup Event)
# --------------------------------------------------------------------------
from app.core.database import init_db

@app.on_event("startup")
async def on_startup():
    if settings.STORE_ADAPTER_TYPE != "mongo":
        logger.info(f"Using {settings.STORE_ADAPTER_TYPE} document store, skipping MongoDB")
        return

    logger.info("Connecting to Database...")
    await init_db()
    logger.info("Database Connection Successful!")

# --------------------------------------------------------------------------
# Exception Handlers
# --------------------------------------------------------------------------
@app.exception_handler(CodeDIYError)
async def domain_exception_handler(request: Request, exc: CodeDIYError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} at {request.url.path}: {exc.message}")
    else:
        logger.info(f"{type(exc).__name__} at {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": type(exc).__name__,
            "detail": exc.message,
            "path": str(request.url)
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_msg = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"Unhandled error at {request.url.path}:\n{error_msg}")

    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal Server Error",
            "detail": str(exc),
            "path": str(request.url)
        }
    )

# --------------------------------------------------------------------------
# Basic Routes
# --------------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "message": "CodeDIY API is running",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

# --------------------------------------------------------------------------
# API Routers
# --------------------------------------------------------------------------
from app.api.v1 import api_router

app.include_router(api_router, prefix="/api/v1")
