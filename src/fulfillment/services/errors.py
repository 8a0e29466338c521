"""Exceptions raised by the order and route services."""


class UnknownCityError(LookupError):
    """The city is not part of the delivery network."""


class UnknownProductError(LookupError):
    pass


class RouteNotFoundError(LookupError):
    """Both cities exist but no road connects them, or one of them is unknown."""

    def __init__(self, message: str, suggestions: list[str] | None = None) -> None:
        super().__init__(message)
        self.suggestions = suggestions or []


class OutOfStockError(ValueError):
    pass


class NoReachableWarehouseError(ValueError):
    """Every stocked warehouse is disconnected from the customer city."""
