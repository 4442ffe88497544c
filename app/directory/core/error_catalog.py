from dataclasses import dataclass

from fastapi import status


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str
    status_code: int


class ErrorCatalog:
    INVALID_DATA_FORMAT = ErrorDefinition(
        "INVALID_DATA_FORMAT",
        "Invalid data format",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    FIXTURE_UNAVAILABLE = ErrorDefinition(
        "FIXTURE_UNAVAILABLE",
        "User fixture unavailable",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    VALIDATION_ERROR = ErrorDefinition(
        "VALIDATION_ERROR",
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
    INTERNAL_ERROR = ErrorDefinition(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, message: str | None = None, details: object | None = None):
        self.error = error
        self.message = message or error.message
        self.details = details
        super().__init__(self.message)
