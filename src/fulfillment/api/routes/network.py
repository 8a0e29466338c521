"""Delivery network endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ...data.network_repository import get_road_network
from ...schemas.network import CityDetailResponse, CityListResponse, NeighborModel

router = APIRouter(prefix="/network", tags=["network"])


@router.get("/cities", response_model=CityListResponse, status_code=status.HTTP_200_OK)
def list_cities() -> CityListResponse:
    names = get_road_network().city_names()
    return CityListResponse(cities=names, total=len(names))


@router.get("/cities/{name}", response_model=CityDetailResponse, status_code=status.HTTP_200_OK)
def city_detail(name: str) -> CityDetailResponse:
    network = get_road_network()
    city = network.city(name)
    if city is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"City '{name}' is not in the delivery network.",
        )
    neighbors = sorted(network.graph.neighbors(city.name), key=lambda edge: (edge.weight, edge.destination))
    return CityDetailResponse(
        name=city.name,
        province=city.province,
        latitude=city.latitude,
        longitude=city.longitude,
        population=city.population,
        is_metro=city.is_metro,
        neighbors=[NeighborModel(city=edge.destination, distance_km=edge.weight) for edge in neighbors],
    )
