"""Exceptions raised by the LinkedIn token strategy."""

from typing import Optional


class LinkedInTokenError(Exception):
    """Base class for strategy errors."""


class ConfigurationError(LinkedInTokenError):
    """Strategy options are missing or inconsistent."""


class OAuthRequestError(LinkedInTokenError):
    """LinkedIn answered a signed request with a non-2xx status."""

    def __init__(self, status_code: int, data: str = ""):
        super().__init__(f"LinkedIn responded with HTTP {status_code}")
        self.status_code = status_code
        self.data = data


class InternalOAuthError(LinkedInTokenError):
    """
    Wraps a failure of the OAuth client.

    The wrapped exception is kept as ``oauth_error`` so callers can
    inspect the upstream status code and body.
    """

    def __init__(self, message: str, oauth_error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error

    def __str__(self) -> str:
        status_code = getattr(self.oauth_error, "status_code", None)
        if status_code is not None:
            return f"{self.message} (status: {status_code})"
        return self.message


class ProfileParseError(LinkedInTokenError, ValueError):
    """Profile payload parsed but is not a JSON object."""


class VerifyError(LinkedInTokenError):
    """The verify callback misbehaved."""
