"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by callers to trigger client-side flows such as re-authentication.
"""

from shared.exceptions import AuthenticationError


class TokenExpiredError(AuthenticationError):
    """
    Raised when an ID token has expired.

    Distinct from every other verification failure so callers can ask
    the client to sign in again.
    """

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")
