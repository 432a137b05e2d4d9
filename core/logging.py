import logging
import sys

from core.config import settings


def setup_logging() -> None:
    """Configure one stdout handler for the app and uvicorn."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        format="%(asctime)s %(levelname)-4s %(name)s : %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        level=level,
    )

    for name in ["uvicorn", "uvicorn.error", "fastapi"]:
        logging.getLogger(name).handlers.clear()
        logging.getLogger(name).propagate = True

    logging.getLogger("uvicorn.access").handlers.clear()
    logging.getLogger("uvicorn.access").propagate = False
