"""Route group exports."""

from . import health, network, orders, products, routes

__all__ = ["health", "network", "orders", "products", "routes"]
