"""
Error taxonomy of the API.

Each error carries the HTTP status it maps to and a human readable
message.  Services raise them; ``main`` installs a handler that turns
any of them into a JSON ``{"message": ...}`` response.
"""


class BookingAPIError(Exception):
    """Base class for all errors reported to API clients."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingToken(BookingAPIError):
    status_code = 401
    message = "No token"


class InvalidToken(BookingAPIError):
    status_code = 403
    message = "Invalid token"


class DuplicateEmail(BookingAPIError):
    status_code = 400
    message = "Email already registered"


class InvalidCredentials(BookingAPIError):
    status_code = 400
    message = "Invalid credentials"


class MissingField(BookingAPIError):
    status_code = 400
    message = "Missing required field"


class UserNotFound(BookingAPIError):
    status_code = 404
    message = "User not found"


class RoomNotFound(BookingAPIError):
    status_code = 404
    message = "Room not found"


class BookingNotFound(BookingAPIError):
    status_code = 404
    message = "Booking not found"


class ContactNotFound(BookingAPIError):
    status_code = 404
    message = "Contact not found"


class StorageUnavailable(BookingAPIError):
    """The backing file of a collection is missing or unreadable."""

    status_code = 500
    message = "Storage unavailable"
