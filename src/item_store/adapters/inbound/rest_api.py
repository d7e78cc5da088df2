"""REST API adapter for the item store.

This module provides a FastAPI-based REST API over the item collection.

Endpoints:
    POST /items - Append an item (duplicate ids allowed)
    GET /items - List all items in insertion order
    PUT /items/{item_id} - Rename the first item with the id
    DELETE /items/{item_id} - Remove every item with the id
    GET /system_info - Current local time (optional)
    GET /health - Health check

The OpenAPI document and Swagger UI are served at the paths configured in
ApiConfig (``/api-docs/openapi.json`` and ``/swagger-ui`` by default).

Routes are plain functions rather than coroutines: the store blocks on its
lock and on file I/O, so they run in the server's worker thread pool.

Usage:
    from item_store.adapters.inbound.rest_api import create_app
    from item_store.adapters.outbound import JsonFileItemRepository
    from item_store.application import ItemService

    service = ItemService.open(JsonFileItemRepository("items.json"))
    app = create_app(service)
    # Run with uvicorn: uvicorn app:app --host 127.0.0.1 --port 8080

References:
    - FastAPI documentation: https://fastapi.tiangolo.com/
"""

from __future__ import annotations

from typing import Annotated

from fastapi import FastAPI, HTTPException, Path, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt, StrictStr

from item_store import __version__
from item_store.domain.entities import MAX_ITEM_ID, Item
from item_store.domain.services import current_local_time
from item_store.infrastructure.config import ApiConfig
from item_store.infrastructure.logging import get_logger
from item_store.ports.inbound import ItemNotFoundError, ItemServicePort
from item_store.ports.outbound import PersistenceError

logger = get_logger(__name__)


class ItemModel(BaseModel):
    """Request and response model for an item."""

    id: StrictInt = Field(..., ge=0, le=MAX_ITEM_ID, description="Caller-supplied item id")
    name: StrictStr = Field(..., description="Item name")

    @classmethod
    def from_item(cls, item: Item) -> ItemModel:
        return cls(id=item.id, name=item.name)

    def to_item(self) -> Item:
        return Item(id=self.id, name=self.name)


class DeleteResponse(BaseModel):
    """Response model for item deletion."""

    id: int = Field(..., description="Deleted item id")
    removed: int = Field(..., description="Number of items removed")


class SystemInfoResponse(BaseModel):
    """Response model for system info."""

    time: str = Field(..., description="Current local time")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    item_count: int = Field(..., description="Number of items held")
    load_degraded: bool = Field(..., description="Persisted file was unreadable at startup")


ItemIdPath = Annotated[int, Path(ge=0, le=MAX_ITEM_ID, description="Id of the item")]


def create_app(service: ItemServicePort, api_config: ApiConfig | None = None) -> FastAPI:
    """Create FastAPI application for the item store.

    Args:
        service: Item service implementing ItemServicePort
        api_config: API surface options (docs paths, optional endpoints)

    Returns:
        Configured FastAPI application
    """
    api_config = api_config or ApiConfig()

    app = FastAPI(
        title=api_config.title,
        description="Create, list, update and delete items held in memory",
        version=__version__,
        docs_url=api_config.docs_url if api_config.enable_docs else None,
        openapi_url=api_config.openapi_url if api_config.enable_docs else None,
        redoc_url=None,
    )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        """Report a failed save as a structured 500."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Failed to persist items"},
        )

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    def health() -> HealthResponse:
        """Health check endpoint."""
        stats = service.stats()
        return HealthResponse(
            status="degraded" if stats.load_degraded else "healthy",
            version=__version__,
            item_count=stats.item_count,
            load_degraded=stats.load_degraded,
        )

    if api_config.enable_system_info:

        @app.get("/system_info", response_model=SystemInfoResponse, tags=["System"])
        def system_info() -> SystemInfoResponse:
            """Get the current local time."""
            return SystemInfoResponse(time=current_local_time())

    @app.post(
        "/items",
        response_model=ItemModel,
        status_code=status.HTTP_201_CREATED,
        tags=["Items"],
    )
    def create_item(request: ItemModel) -> ItemModel:
        """Append a new item."""
        created = service.create(request.to_item())
        return ItemModel.from_item(created)

    @app.get("/items", response_model=list[ItemModel], tags=["Items"])
    def list_items() -> list[ItemModel]:
        """List all items in insertion order."""
        return [ItemModel.from_item(item) for item in service.list()]

    @app.put(
        "/items/{item_id}",
        response_model=ItemModel,
        responses={404: {"description": "Item not found"}},
        tags=["Items"],
    )
    def update_item(item_id: ItemIdPath, request: ItemModel) -> ItemModel:
        """Rename an item. The id in the body is ignored."""
        try:
            updated = service.update(item_id, request.name)
        except ItemNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        return ItemModel.from_item(updated)

    @app.delete(
        "/items/{item_id}",
        response_model=DeleteResponse,
        responses={404: {"description": "Item not found"}},
        tags=["Items"],
    )
    def delete_item(item_id: ItemIdPath) -> DeleteResponse:
        """Delete every item with the id."""
        try:
            removed = service.delete(item_id)
        except ItemNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        return DeleteResponse(id=item_id, removed=removed)

    return app


def run_server(
    service: ItemServicePort,
    host: str = "127.0.0.1",
    port: int = 8080,
    api_config: ApiConfig | None = None,
) -> None:
    """Run the REST API server.

    Args:
        service: The item service.
        host: Host to bind to.
        port: Port to bind to.
        api_config: API surface options.
    """
    import uvicorn

    app = create_app(service, api_config)
    logger.info("item_store_starting", host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_config=None)
