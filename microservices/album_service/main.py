"""
Album Microservice

In-memory album record store exposed over HTTP
Handles album listing, artist filtering and album CRUD

Port: 3004 (PORT)
"""

import os
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Body, Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from core.config import ServiceConfig
from core.config_manager import ConfigManager
from core.logger import setup_service_logger

from .album_service import AlbumService
from .factory import create_album_service
from .models import AlbumServiceInfo, AlbumServiceStatus
from .protocols import (
    AlbumNotFoundError,
    AlbumServiceError,
    AlbumValidationError,
    InvalidAlbumIdError,
)
from .routes_registry import SERVICE_METADATA, get_route_summary, get_routes

# Initialize configuration
config_manager = ConfigManager("album_service")
service_config = config_manager.get_service_config()

# Setup loggers
app_logger = setup_service_logger("album_service", config=config_manager.get_logging_config())
# Module loggers (microservices.album_service.*) write through the package logger
setup_service_logger(__package__, config=config_manager.get_logging_config())
logger = app_logger

GREETING = "hello Album Service world!"

# Global service instance
album_service: Optional[AlbumService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    global album_service

    logger.info("Starting Album Service...")

    # Fresh in-memory store for every application start
    album_service = create_album_service(config_manager)
    album_count = await album_service.count_albums()
    logger.info(f"✅ Album store initialized with {album_count} albums")

    route_meta = get_route_summary()
    logger.info(
        f"Album Service started on port {service_config.service_port} "
        f"({route_meta['route_count']} routes)"
    )

    yield

    album_service = None
    logger.info("Album Service stopped")


# Initialize FastAPI app
app = FastAPI(
    title="Album Service",
    description="In-memory album record store",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan,
)


# ==================== Dependency Injection ====================


def get_album_service() -> AlbumService:
    """Get album service instance"""
    if album_service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return album_service


def get_service_config() -> ServiceConfig:
    """Get service configuration"""
    return service_config


# ==================== Health Check ====================


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint - plain text greeting"""
    return GREETING


@app.get("/health")
async def health_check(service: AlbumService = Depends(get_album_service)):
    """Health check endpoint"""
    store_ok = await service.check_connection()
    status = AlbumServiceStatus(
        service=SERVICE_METADATA["service_name"],
        status="healthy" if store_ok else "unhealthy",
        version=SERVICE_METADATA["version"],
        album_count=await service.count_albums() if store_ok else 0,
        timestamp=datetime.now(timezone.utc),
    )
    status_code = 200 if store_ok else 503
    return JSONResponse(content=status.model_dump(mode="json"), status_code=status_code)


@app.get("/info", response_model=AlbumServiceInfo)
async def service_info():
    """Service metadata and route table"""
    return AlbumServiceInfo(
        service=SERVICE_METADATA["service_name"],
        version=SERVICE_METADATA["version"],
        tags=SERVICE_METADATA["tags"],
        capabilities=SERVICE_METADATA["capabilities"],
        routes=get_routes(),
    )


# ==================== Album Management ====================


@app.get("/albums")
async def list_albums(
    artist_name: Optional[str] = Query(
        None, alias="artistName", description="Exact, case-sensitive artist filter"
    ),
    service: AlbumService = Depends(get_album_service),
):
    """
    List all albums, or only those by one artist

    Args:
        artist_name: Optional exact artist name

    Returns:
        List of albums
    """
    try:
        return await service.list_albums(artist_name)
    except AlbumNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlbumServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/albums/{album_id}")
async def get_album(
    album_id: str,
    service: AlbumService = Depends(get_album_service),
):
    """
    Get album by ID

    Args:
        album_id: Album ID from the path

    Returns:
        Album details
    """
    try:
        return await service.get_album(album_id)
    except InvalidAlbumIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AlbumNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlbumServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/albums")
async def create_album(
    body: Any = Body(None),
    service: AlbumService = Depends(get_album_service),
    config: ServiceConfig = Depends(get_service_config),
):
    """
    Create a new album

    Args:
        body: Album fields; the four compulsory keys must be present

    Returns:
        The full album list, new album last
    """
    try:
        return await service.create_album(body)
    except AlbumValidationError as e:
        raise HTTPException(status_code=config.validation_status_code, detail=str(e))
    except AlbumServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.put("/albums/{album_id}")
async def update_album(
    album_id: str,
    body: Any = Body(None),
    service: AlbumService = Depends(get_album_service),
    config: ServiceConfig = Depends(get_service_config),
):
    """
    Update album

    Args:
        album_id: Album ID from the path
        body: Fields to merge; the four compulsory fields must be non-empty

    Returns:
        [original, updated]
    """
    try:
        return await service.update_album(album_id, body)
    except InvalidAlbumIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AlbumNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlbumValidationError as e:
        raise HTTPException(status_code=config.validation_status_code, detail=str(e))
    except AlbumServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.delete("/albums/{album_id}")
async def delete_album(
    album_id: str,
    service: AlbumService = Depends(get_album_service),
):
    """
    Delete album

    Args:
        album_id: Album ID from the path

    Returns:
        The removed album
    """
    try:
        return await service.delete_album(album_id)
    except InvalidAlbumIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AlbumNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AlbumServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ==================== Run Server ====================


def main() -> None:
    """Run the album service with uvicorn"""
    import uvicorn

    uvicorn.run(
        "microservices.album_service.main:app",
        host=service_config.service_host,
        port=service_config.service_port,
        reload=service_config.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
