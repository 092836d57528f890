from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from dotenv import load_dotenv
import os
import sys
import logging
from services.database import init_db, close_engine
from routers import export, history, templates, transcripts
from utils.response_utils import error_response

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Validate required environment variables
REQUIRED_ENV_VARS = ["OPENAI_API_KEY", "DATABASE_URL"]

def validate_environment():
    """Validate that all required environment variables are set."""
    missing = [var for var in REQUIRED_ENV_VARS if not os.getenv(var)]
    if missing:
        logger.error(f"Missing required environment variables: {missing}")
        sys.exit(1)
    logger.info("Environment validation passed")

def log_configuration():
    """Log the effective pipeline configuration at startup."""
    logger.info("=" * 60)
    logger.info("Transcript formatter configuration")
    logger.info(f"  OpenAI model: {os.getenv('OPENAI_MODEL', 'gpt-4o')}")
    logger.info(f"  Chunk size: {os.getenv('TRANSCRIPT_CHUNK_SIZE', '30000')} chars")
    logger.info(f"  Preferred caption language: {os.getenv('TRANSCRIPT_PRIMARY_LANGUAGE', 'en')}")
    logger.info("=" * 60)

# Call validation at startup
validate_environment()
log_configuration()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await close_engine()


app = FastAPI(title="YouTube Transcript Formatter", lifespan=lifespan)

# Include routers
app.include_router(transcripts.router)
app.include_router(templates.router)
app.include_router(history.router)
app.include_router(export.router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return request validation failures in the API's error format."""
    logger.warning(
        f"Validation error for {request.method} {request.url.path}: {exc.errors()}"
    )
    return error_response(400, "Invalid request", str(exc))
