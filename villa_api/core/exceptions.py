from fastapi import status


class VillaAPIError(Exception):
    """Base class for errors that map onto an APIResponse envelope."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(VillaAPIError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(VillaAPIError):
    """Duplicate name/number or a key already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class ValidationFailedError(VillaAPIError):
    status_code = status.HTTP_400_BAD_REQUEST


class RegistrationError(VillaAPIError):
    """Account could not be persisted for a reason other than a duplicate username."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
