"""Data access helpers for loading the city road network."""

from __future__ import annotations

import csv
import functools
import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar

from ..config import settings
from ..models.domain import City, Route
from ..services.routing.graph import Graph

T = TypeVar("T")


def normalize_city_name(name: str) -> str:
    return " ".join(name.split())


def city_key(name: str) -> str:
    return normalize_city_name(name).casefold()


def coerce_optional(value: Optional[str], cast: Callable[[str], T]) -> Optional[T]:
    if value is None or value.strip() == "":
        return None
    try:
        return cast(value.replace(",", "").strip())
    except ValueError as exc:
        raise ValueError(f"Unable to parse {cast.__name__} from value '{value}'") from exc


def check_columns(reader: csv.DictReader, path: Path, required: set[str]) -> None:
    if not reader.fieldnames:
        raise ValueError(f"File '{path}' is missing a header row.")
    missing_columns = required - {name.strip() for name in reader.fieldnames}
    if missing_columns:
        raise ValueError(f"File '{path}' missing columns: {', '.join(sorted(missing_columns))}")


@functools.lru_cache(maxsize=1)
def load_cities(source: Optional[Path] = None) -> tuple[City, ...]:
    """Load cities from the configured CSV file."""

    csv_path = source or settings.cities_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Cities file not found: {csv_path}")

    cities: list[City] = []
    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        check_columns(reader, csv_path, {"name"})
        for row in reader:
            name = normalize_city_name(row.get("name") or "")
            if not name:
                continue
            cities.append(
                City(
                    name=name,
                    city_id=coerce_optional(row.get("id"), int),
                    province=(row.get("province") or "").strip() or None,
                    latitude=coerce_optional(row.get("latitude"), float),
                    longitude=coerce_optional(row.get("longitude"), float),
                    population=coerce_optional(row.get("population"), int),
                )
            )
    logging.info(f"Loaded {len(cities)} cities from {csv_path}")
    return tuple(cities)


@functools.lru_cache(maxsize=1)
def load_routes(source: Optional[Path] = None) -> tuple[Route, ...]:
    """Load road segments from the configured CSV file."""

    csv_path = source or settings.routes_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Routes file not found: {csv_path}")

    routes: list[Route] = []
    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        check_columns(reader, csv_path, {"from_city", "to_city", "distance_km"})
        for line_number, row in enumerate(reader, start=2):
            from_city = normalize_city_name(row.get("from_city") or "")
            to_city = normalize_city_name(row.get("to_city") or "")
            distance = coerce_optional(row.get("distance_km"), int)
            if not from_city or not to_city or distance is None:
                logging.warning(f"Skipping incomplete route on line {line_number} of {csv_path}")
                continue
            routes.append(
                Route(
                    from_city=from_city,
                    to_city=to_city,
                    distance_km=distance,
                    road_type=(row.get("road_type") or "").strip() or None,
                )
            )
    logging.info(f"Loaded {len(routes)} routes from {csv_path}")
    return tuple(routes)


class RoadNetwork:
    """Loaded routing graph plus a case-insensitive index of city names.

    Every name reaching the graph goes through :meth:`resolve`, so the graph
    itself only ever sees the canonical spelling of a city.
    """

    def __init__(self) -> None:
        self.graph = Graph()
        self._names: dict[str, str] = {}
        self._cities: dict[str, City] = {}

    @classmethod
    def from_records(cls, cities: Iterable[City], routes: Iterable[Route]) -> "RoadNetwork":
        network = cls()
        for city in cities:
            network.add_city(city)
        for route in routes:
            network.add_route(route)
        return network

    def _register(self, name: str) -> str:
        normalized = normalize_city_name(name)
        return self._names.setdefault(normalized.casefold(), normalized)

    def add_city(self, city: City) -> None:
        canonical = self._register(city.name)
        self._cities[canonical] = city if city.name == canonical else replace(city, name=canonical)
        self.graph.add_vertex(canonical)

    def add_route(self, route: Route) -> None:
        self.graph.add_route(
            self._register(route.from_city),
            self._register(route.to_city),
            route.distance_km,
        )

    def resolve(self, name: str) -> Optional[str]:
        """Canonical spelling of ``name`` if the city is in the network."""
        return self._names.get(city_key(name))

    def city(self, name: str) -> Optional[City]:
        canonical = self.resolve(name)
        if canonical is None:
            return None
        return self._cities.get(canonical, City(name=canonical))

    def city_names(self) -> list[str]:
        return sorted(self.graph.all_vertices(), key=str.casefold)


@functools.lru_cache(maxsize=1)
def get_road_network() -> RoadNetwork:
    """Build the road network once per process from the configured files."""

    network = RoadNetwork.from_records(load_cities(), load_routes())
    logging.info(
        f"Road network ready: {network.graph.vertex_count} cities, {network.graph.route_count} routes"
    )
    return network


def clear_network_cache() -> None:
    load_cities.cache_clear()
    load_routes.cache_clear()
    get_road_network.cache_clear()
