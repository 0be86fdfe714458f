from fastapi import FastAPI

from app.db import Base, engine
from app.api.api_v1.api import api_router
import app.models
from app.core.config import settings
from app.core.logging import get_logger, setup_logging

setup_logging(
    json_logs=settings.LOG_JSON,
    log_file=settings.LOG_TO_FILE,
    level=settings.LOG_LEVEL,
    log_dir=settings.LOG_DIR,
)
logger = get_logger(module="main")

app = FastAPI(title=settings.PROJECT_NAME)

app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def on_startup():
    # Crea las tablas si no existen (y el fichero sqlite)
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas comprobadas", database_url=settings.DATABASE_URL)


@app.get("/", tags=["health"])
def read_root():
    return {"message": "ok"}
