"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class GeocodingError(ServiceError):
    """Raised when the geocoding service cannot answer a query."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
