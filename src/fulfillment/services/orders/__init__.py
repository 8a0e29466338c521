"""Warehouse selection and order quoting."""

from .selector import FulfillmentSelection, FulfillmentSelector
from .service import quote_order

__all__ = ["FulfillmentSelection", "FulfillmentSelector", "quote_order"]
