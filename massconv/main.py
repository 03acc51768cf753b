"""Mass Unit Converter - Main Application"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from massconv.api.conversion import router as conversion_router
from massconv.common.config import settings
from massconv.conversion import get_conversion_table

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    table = get_conversion_table()
    logger.info(f"{settings.app.name} ready with {len(table)} conversion rules")
    yield


app = FastAPI(
    title="Mass Unit Converter",
    description="Convert quantities between pounds, kilograms, grams and metric tons",
    version="0.1.0",
    debug=settings.app.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.app.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(conversion_router)

@app.get("/")
async def root():
    return {"message": "Mass Unit Converter", "status": "running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}


def configure_logging():
    logging.basicConfig(
        level=settings.app.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run():
    configure_logging()
    logger.info(f"Starting {settings.app.name} on {settings.app.host}:{settings.app.port}")
    uvicorn.run(
        app,
        host=settings.app.host,
        port=settings.app.port,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()
