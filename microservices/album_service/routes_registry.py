"""
Album Service Routes Registry
Defines all API routes and the service metadata served by /info
"""
from typing import List, Dict, Any

SERVICE_ROUTES = [
    {
        "path": "/",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Greeting"
    },
    {
        "path": "/health",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Service health check"
    },
    {
        "path": "/info",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Service metadata and route table"
    },
    # Album Management
    {
        "path": "/albums",
        "methods": ["GET", "POST"],
        "auth_required": False,
        "description": "List (optionally by artistName) / create albums"
    },
    {
        "path": "/albums/{album_id}",
        "methods": ["GET", "PUT", "DELETE"],
        "auth_required": False,
        "description": "Get/update/delete album"
    },
]


def get_route_summary() -> Dict[str, Any]:
    """
    Compact route metadata: counts per group and the verbs in use
    """
    health_routes = []
    album_routes = []
    for route in SERVICE_ROUTES:
        if route["path"].startswith("/albums"):
            album_routes.append(route)
        else:
            health_routes.append(route)
    methods = sorted({method for route in SERVICE_ROUTES for method in route["methods"]})
    return {
        "route_count": len(SERVICE_ROUTES),
        "base_path": "/albums",
        "health": len(health_routes),
        "albums": len(album_routes),
        "methods": methods,
    }


def get_routes() -> List[Dict[str, Any]]:
    """Copy of the route table"""
    return [dict(route) for route in SERVICE_ROUTES]


# Service metadata
SERVICE_METADATA = {
    "service_name": "album_service",
    "version": "1.0.0",
    "tags": ["v1", "album-management", "in-memory"],
    "capabilities": [
        "album_listing",
        "artist_filtering",
        "album_crud",
    ]
}
