from dotenv import load_dotenv

# Load env variables FIRST, before importing modules that create loggers
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.core.clients import create_ocr_client, create_structurer, load_test_payload
from app.routers import exams, viewer
from utils.logger import get_logger, set_log_level

set_log_level(settings.LOG_LEVEL)
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # API clients are built once and shared by every request
    app.state.ocr_client = create_ocr_client(settings)
    app.state.structurer = create_structurer(settings)
    app.state.test_payload = load_test_payload(settings)
    logger.info(f"{settings.PROJECT_NAME} v{settings.PROJECT_VERSION} started")
    yield
    await app.state.ocr_client.aclose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(exams.router, tags=["Exams"])
app.include_router(viewer.router, tags=["Viewer"])


@app.get("/health")
def health_check():
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": settings.PROJECT_VERSION,
    }


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
