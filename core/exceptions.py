import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crud.store import StoreError
from services.ordering import ReorderError
from services.replication import ReplicationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "The data store rejected the request"})

    @app.exception_handler(ReorderError)
    async def reorder_error_handler(request: Request, exc: ReorderError):
        logger.warning("%s %s reorder failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=409, content={"detail": f"{exc}. Reload the list and try again."})

    @app.exception_handler(ReplicationError)
    async def replication_error_handler(request: Request, exc: ReplicationError):
        logger.error("%s %s duplication failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": f"Could not duplicate project: {exc}"})
