class GeoListingsError(Exception):
    """Base class for errors raised while serving listings."""


class InvalidFilterError(GeoListingsError):
    """A filter query parameter is not an integer."""

    def __init__(self, param: str):
        super().__init__(f"{param} is not a number")
        self.param = param


class DataAccessError(GeoListingsError):
    """The listings query or the iteration over its rows failed."""


class SerializationError(GeoListingsError):
    """The feature collection could not be rendered as JSON."""
