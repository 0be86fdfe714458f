# app/core/logging.py
import logging
import os
import sys
from typing import Any

from loguru import logger

from app.core.config import settings


class InterceptHandler(logging.Handler):
    """
    Redirige los logs de logging estándar a loguru.
    """
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        # sube en la pila hasta salir de logging/__init__.py
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(
            depth=depth,
            exception=record.exc_info,
        ).log(level, record.getMessage())


def setup_logging(
    *,
    json_logs: bool = False,
    log_file: bool = True,
    level: str = "INFO",
    log_dir: str = settings.LOG_DIR,
) -> None:
    """
    Config global:
    - Intercepta logging estándar (uvicorn, sqlalchemy, fastapi, etc.)
    - Consola: desde `level`
    - Ficheros (en `log_dir`):
        - app_YYYY-MM-DD.log   → hasta WARNING
        - error_YYYY-MM-DD.log → ERROR y superiores
    """
    logging.root.handlers = []
    logging.root.setLevel(level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "sqlalchemy"):
        logging.getLogger(name).handlers = [InterceptHandler()]
        logging.getLogger(name).propagate = False

    logger.remove()

    if json_logs:
        # serialize=True: loguru vuelca el record completo (extra incluido) como JSON
        fmt = "{message}"
    else:
        fmt = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level> {extra}"
        )

    logger.add(
        sys.stdout,
        format=fmt,
        level=level,
        serialize=json_logs,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        os.makedirs(log_dir, exist_ok=True)

        app_log_path = os.path.join(log_dir, "app_{time:YYYY-MM-DD}.log")
        error_log_path = os.path.join(log_dir, "error_{time:YYYY-MM-DD}.log")

        logger.add(
            app_log_path,
            format=fmt,
            level=level,
            serialize=json_logs,
            filter=lambda record: record["level"].no < 40,  # < ERROR (40)
            rotation="00:00",
            retention="7 days",
            compression="zip",
            enqueue=True,
        )

        logger.add(
            error_log_path,
            format=fmt,
            level="ERROR",
            serialize=json_logs,
            rotation="00:00",
            retention="30 days",       # los errores se guardan más tiempo
            compression="zip",
            enqueue=True,
        )


def get_logger(**binds: Any):
    """
    Helper para obtener un logger con contexto extra.
    Ej: logger = get_logger(module="egg_sale_service")
    """
    return logger.bind(**binds)
