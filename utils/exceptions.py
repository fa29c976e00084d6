from fastapi import status


class AppError(Exception):
    """Base class for every error reported back to the API caller.

    ``kind`` is the machine-readable error name put in the response body,
    ``status_code`` the HTTP status it maps to.
    """

    kind = "AppError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Unexpected error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    kind = "ValidationError"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidReference(AppError):
    kind = "InvalidReference"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Referenced entity does not exist"


class InvalidCredentials(AppError):
    kind = "InvalidCredentials"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Unauthorized(AppError):
    kind = "Unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class NotFound(AppError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageWriteError(AppError):
    kind = "StorageWriteError"
    default_message = "Datastore could not be written"


class StorageCorruptError(AppError):
    kind = "StorageCorruptError"
    default_message = "Datastore is corrupt"
