import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
from interview_generator.api.vapi import vapi_router
from interview_generator.core.config import settings
from interview_generator.core.logger import setup_logger
from interview_generator.core.exceptions import (
    AppError,
    app_error_handler,
    global_exception_handler,
    http_exception_handler,
)

setup_logger(
    log_level=logging.DEBUG if settings.DEBUG_MODE else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    use_json=settings.LOG_JSON,
    log_to_file=settings.LOG_TO_FILE,
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: Interview Generator")
    if not settings.VAPI_SECRET:
        logger.warning("VAPI_SECRET is not set; x-vapi-secret header check is disabled")
    yield
    logger.info("Application shutdown")

app = FastAPI(
    title="Interview Generator",
    description="Generates voice-interview questions with Gemini and stores them in Firestore.",
    version="1.0.0",
    lifespan=lifespan
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(vapi_router, prefix="/api", tags=["vapi"])
