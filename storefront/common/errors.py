"""Error types raised by the storefront services and mapped to HTTP statuses by the API."""


class StorefrontError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    status_code = 404


class CartOwnershipError(StorefrontError):
    """The caller's session does not own the targeted cart item."""

    status_code = 403


class MissingSessionError(StorefrontError):
    status_code = 400
