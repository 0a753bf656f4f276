"""
Request signing for the Letterboxd API.

The server verifies every request by recomputing

    HMAC-SHA256(secret, METHOD + "\\0" + url + "\\0" + body)

where ``url`` is the full request URL up to, but excluding, the trailing
``&signature=`` parameter. Everything in this module is a pure function of
its arguments except ``nonce()`` and ``now()``.
"""

import hashlib
import hmac
import time
import uuid
from typing import Union

from .credentials import ApiKeyPair

SEPARATOR = "\0"


def nonce() -> str:
    """Return a fresh UUID4 nonce in lowercase hyphenated form."""
    return str(uuid.uuid4())


def now() -> int:
    """Return the current time in whole seconds since the epoch."""
    return int(time.time())


def hmac_sha256(secret: str, message: str) -> str:
    """Hex-encoded HMAC-SHA256 of ``message`` keyed with ``secret``."""
    mac = hmac.new(
        secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


def canonical_url(base_url: str, endpoint: str, api_key: str, nonce: str,
                  timestamp: int, query: str = "") -> str:
    """
    Build the URL the signature is computed over.

    ``query`` must already be form-encoded; it is appended verbatim.
    """
    url = f"{base_url}{endpoint}?apikey={api_key}&nonce={nonce}&timestamp={timestamp}"
    if query:
        url = f"{url}&{query}"
    return url


def canonical_message(method: str, url: str, body: Union[str, bytes] = "") -> str:
    """Join method, URL and body with NUL bytes."""
    if isinstance(body, bytes):
        body = body.decode('utf-8')
    return SEPARATOR.join((method.upper(), url, body or ""))


def sign(method: str, base_url: str, endpoint: str, query: str, body: Union[str, bytes],
         api_key_pair: ApiKeyPair, nonce: str, timestamp: int) -> str:
    """
    Compute the request signature for fixed nonce and timestamp.

    Args:
        method: HTTP method
        base_url: API root, ending with "/"
        endpoint: Path relative to ``base_url``
        query: Form-encoded query string, or ""
        body: Request body exactly as sent, or ""
        api_key_pair: Credentials
        nonce: Request nonce
        timestamp: Seconds since epoch

    Returns:
        Lowercase hex signature
    """
    url = canonical_url(base_url, endpoint, api_key_pair.api_key, nonce, timestamp, query)
    return hmac_sha256(api_key_pair.api_secret, canonical_message(method, url, body))


def signed_url(method: str, base_url: str, endpoint: str, query: str, body: Union[str, bytes],
               api_key_pair: ApiKeyPair, nonce: str, timestamp: int) -> str:
    """Return the canonical URL with its ``signature`` parameter appended."""
    url = canonical_url(base_url, endpoint, api_key_pair.api_key, nonce, timestamp, query)
    signature = hmac_sha256(api_key_pair.api_secret, canonical_message(method, url, body))
    return f"{url}&signature={signature}"


def generate_signed_url(method: str, base_url: str, endpoint: str, query: str,
                        body: Union[str, bytes], api_key_pair: ApiKeyPair) -> str:
    """Sign a request with a fresh nonce and the current timestamp."""
    return signed_url(method, base_url, endpoint, query, body, api_key_pair, nonce(), now())
