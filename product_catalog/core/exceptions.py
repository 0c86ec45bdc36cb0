from typing import Optional


class ProductError(Exception):
    """
    Base class for all product errors in the product service.
    Should not be exposed directly to the client; convert to an ErrorResponse.
    """

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class ProductNotFoundError(ProductError):
    """Raised when an update or delete targets a product id that is not stored."""

    pass


class ProductAlreadyExistsError(ProductError):
    """Raised when trying to create a product with an id that already exists."""

    pass


# ------------------------
# Authentication errors
# ------------------------
class AuthenticationError(Exception):
    """Base class for failures while establishing the request principal."""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception


class CertificateError(AuthenticationError):
    """Raised when a client certificate subject is present but carries no usable CN."""

    pass


class TokenError(AuthenticationError):
    """Base class for token-related failures."""

    pass


class TokenExpiredError(TokenError):
    """Raised when a token's expiration time has passed."""

    pass


class TokenInvalidError(TokenError):
    """Raised when a token is malformed or has an invalid signature."""

    pass


class TokenMissingClaimError(TokenError):
    """Raised when a required claim (e.g. 'sub') is missing."""

    pass
