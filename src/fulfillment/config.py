"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FULFILL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Warehouse Fulfillment Routing API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for static data files.")
    cities_file: Path = Field(
        default=Path("data/cities.csv"),
        description="Cities in the delivery network.",
    )
    routes_file: Path = Field(
        default=Path("data/routes.csv"),
        description="Bidirectional road segments between cities with distances in km.",
    )
    warehouses_file: Path = Field(
        default=Path("data/warehouses.csv"),
        description="Warehouse locations.",
    )
    products_file: Path = Field(
        default=Path("data/products.csv"),
        description="Product catalog.",
    )
    inventory_file: Path = Field(
        default=Path("data/inventory.csv"),
        description="Per-warehouse stock levels.",
    )
    delivery_rate_per_km: float = Field(
        default=10.0,
        ge=0.0,
        description="Delivery charge applied per kilometer of road distance.",
    )
    max_suggested_cities: int = Field(default=8, ge=0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator(
        "data_root",
        "cities_file",
        "routes_file",
        "warehouses_file",
        "products_file",
        "inventory_file",
        mode="before",
    )
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
