"""
Letterboxd API client library.

A Python client for the Letterboxd API v0 that signs every request with
the API key pair and decodes responses into typed models.

Example usage:
    import letterboxd

    api_key_pair = letterboxd.ApiKeyPair.from_env()
    with letterboxd.Client(api_key_pair) as client:
        resp = client.search(letterboxd.SearchRequest(input="Fight Club", per_page=1))
"""

import logging

from .client import Client
from .codec import decode, encode_body, encode_query
from .credentials import ApiKeyPair
from .exceptions import (
    LetterboxdError,
    ConfigurationError,
    TransportError,
    UriError,
    EncodingError,
    DecodingError,
    ServerError
)
from .constants import (
    API_BASE_URL,
    DEFAULT_CONFIG,
    ENV_API_KEY,
    ENV_API_SECRET,
    __version__
)
from .models import *  # noqa: F401,F403
from . import models

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "ApiKeyPair",
    "LetterboxdError",
    "ConfigurationError",
    "TransportError",
    "UriError",
    "EncodingError",
    "DecodingError",
    "ServerError",
    "API_BASE_URL",
    "DEFAULT_CONFIG",
    "ENV_API_KEY",
    "ENV_API_SECRET",
    "decode",
    "encode_body",
    "encode_query",
    "models",
] + models.__all__
