"""Multi-warehouse order fulfillment routing service."""
