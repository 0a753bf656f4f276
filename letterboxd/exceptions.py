"""
Exceptions raised by the Letterboxd client library.

Every failure reaches the caller as a subclass of ``LetterboxdError``. The
``url`` attribute holds the signed request URL when the failure happened
after the URL was built.
"""

import json
from typing import List, Optional


class LetterboxdError(Exception):
    """Base exception for Letterboxd client errors."""

    def __init__(self, message: str = "", url: Optional[str] = None):
        super().__init__(message)
        self.url = url

    def __str__(self):
        detail = super().__str__()
        if self.url:
            return f"{self.url}: {detail}"
        return detail


class ConfigurationError(LetterboxdError):
    """Raised when client configuration or credentials are invalid."""
    pass


class TransportError(LetterboxdError):
    """Raised when the HTTP connection fails (DNS, TLS, reset, timeout)."""
    pass


class UriError(LetterboxdError):
    """Raised when the signed URL is not a valid URI."""
    pass


class EncodingError(LetterboxdError):
    """Raised when a request query or body cannot be serialized."""
    pass


class DecodingError(LetterboxdError):
    """Raised when a response body is not valid JSON for the expected model."""
    pass


class ServerError(LetterboxdError):
    """
    Raised when the server answers with a status code outside 200-299.

    Attributes:
        status_code: HTTP status code
        response: Response body, decoded as UTF-8 (invalid bytes replaced)
        url: Signed URL of the request
    """

    def __init__(self, status_code: int, response: str, url: Optional[str] = None):
        super().__init__(f"Server Error: {status_code}, Response: {response}", url)
        self.status_code = status_code
        self.response = response

    def messages(self) -> List[dict]:
        """
        Return the ``{type, code, title}`` messages carried by the body.

        The API reports business-rule violations either as a single
        ``{"code", "title"}`` object or inside a ``messages`` array. Bodies
        that are not JSON yield an empty list.
        """
        try:
            payload = json.loads(self.response)
        except ValueError:
            return []

        if isinstance(payload, dict):
            if isinstance(payload.get('messages'), list):
                return [m for m in payload['messages'] if isinstance(m, dict)]
            if 'code' in payload:
                return [payload]
        return []
