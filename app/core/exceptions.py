from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    error_type: str = "service_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message


class NotFoundError(ServiceError):
    """A referenced author or book does not exist."""

    status_code = HTTP_404_NOT_FOUND
    error_type = "not_found"


class ConflictError(ServiceError):
    """A destructive operation is blocked by dependent records."""

    status_code = HTTP_409_CONFLICT
    error_type = "conflict"


class StorageError(ServiceError):
    """The persistence layer failed. The message never carries driver details."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    error_type = "storage_error"
