"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_network_loader():
    """Lazy import to avoid startup failures."""
    from ...data.network_repository import get_road_network
    return get_road_network


@router.get("/health/network", status_code=status.HTTP_200_OK)
def health_network() -> dict:
    """Check that the road network loads and report its size."""
    try:
        network = _get_network_loader()()
        return {
            "service": "network",
            "healthy": network.graph.vertex_count > 0,
            "cities": network.graph.vertex_count,
            "routes": network.graph.route_count,
        }
    except Exception as e:
        return {"service": "network", "healthy": False, "error": str(e)}
