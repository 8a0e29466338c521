"""Domain models for cities, warehouses and catalog records."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DeliveryPriority(str, Enum):
    """How a fulfilling warehouse is ranked against the customer city."""

    COST = "cost"
    SPEED = "speed"


@dataclass(frozen=True, slots=True)
class City:
    """A city in the delivery network."""

    name: str
    city_id: Optional[int] = None
    province: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    population: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.name}, {self.province}" if self.province else self.name

    @property
    def is_metro(self) -> bool:
        return (self.population or 0) > 1_000_000


@dataclass(frozen=True, slots=True)
class Route:
    """A road segment between two cities, distance in kilometers."""

    from_city: str
    to_city: str
    distance_km: int
    road_type: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Warehouse:
    warehouse_id: int
    name: str
    city: str
    address: Optional[str] = None
    capacity: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Product:
    product_id: int
    name: str
    price: float
    category: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True, slots=True)
class InventoryRecord:
    warehouse_id: int
    product_id: int
    quantity: int


@dataclass(frozen=True, slots=True)
class Candidate:
    """A warehouse being evaluated as the fulfillment source for one order."""

    warehouse_id: int
    city: str
