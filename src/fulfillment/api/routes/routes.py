"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.routing import HopCountResponse, RouteReportModel, RouteSegmentModel
from ...services.errors import RouteNotFoundError
from ...services.routing.service import count_hops, find_route

router = APIRouter(prefix="/routes", tags=["routes"])


def _not_found(exc: RouteNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"message": str(exc), "available_cities": exc.suggestions},
    )


@router.get("/shortest", response_model=RouteReportModel, status_code=status.HTTP_200_OK)
def shortest_route(
    origin: str = Query(..., min_length=1, description="Starting city"),
    destination: str = Query(..., min_length=1, description="Destination city"),
) -> RouteReportModel:
    """Shortest road route between two cities, optimized for distance."""
    try:
        report = find_route(origin, destination)
    except RouteNotFoundError as exc:
        raise _not_found(exc) from exc
    except Exception as exc:
        logging.exception(f"Error computing route {origin} -> {destination}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Route calculation failed: {str(exc)}",
        ) from exc

    return RouteReportModel(
        origin=report.origin,
        destination=report.destination,
        path=report.path,
        city_count=report.city_count,
        total_distance_km=report.total_distance_km,
        estimated_cost=report.estimated_cost,
        segments=[
            RouteSegmentModel(
                from_city=segment.from_city,
                to_city=segment.to_city,
                distance_km=segment.distance_km,
            )
            for segment in report.segments
        ],
    )


@router.get("/hops", response_model=HopCountResponse, status_code=status.HTTP_200_OK)
def route_hops(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
) -> HopCountResponse:
    """Fewest road segments between two cities, ignoring distance."""
    try:
        hops = count_hops(origin, destination)
    except RouteNotFoundError as exc:
        raise _not_found(exc) from exc
    except Exception as exc:
        logging.exception(f"Error counting hops {origin} -> {destination}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Hop calculation failed: {str(exc)}",
        ) from exc
    return HopCountResponse(origin=origin, destination=destination, hops=hops)
