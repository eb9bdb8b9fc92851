"""Domain errors raised by the services and mapped to HTTP responses in main."""


class AssetVerseError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AssetVerseError):
    status_code = 400


class ConflictError(AssetVerseError):
    status_code = 400


class NotFoundError(AssetVerseError):
    status_code = 404


class InvalidStateError(AssetVerseError):
    status_code = 400


class CapacityExceededError(AssetVerseError):
    status_code = 403


class InventoryExhaustedError(AssetVerseError):
    status_code = 409


class AuthorizationError(AssetVerseError):
    """Non-HR caller (403) or missing/invalid credential (401)."""

    status_code = 403
