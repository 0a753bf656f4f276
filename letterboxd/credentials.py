"""
API key pair used to sign every request.
"""

import os
from dataclasses import dataclass, field

from .constants import ENV_API_KEY, ENV_API_SECRET
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ApiKeyPair:
    """
    Public API key and shared secret issued by Letterboxd.

    The key is sent in every URL as ``apikey``; the secret only ever keys
    the HMAC and is kept out of ``repr()``.
    """

    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")
        if not self.api_secret:
            raise ConfigurationError("api_secret cannot be empty")

    @classmethod
    def from_env(cls, key_var: str = ENV_API_KEY, secret_var: str = ENV_API_SECRET) -> "ApiKeyPair":
        """
        Build a key pair from environment variables.

        Args:
            key_var: Variable holding the API key
            secret_var: Variable holding the API secret

        Raises:
            ConfigurationError: If either variable is unset or empty
        """
        api_key = os.environ.get(key_var, "")
        api_secret = os.environ.get(secret_var, "")
        missing = [name for name, value in ((key_var, api_key), (secret_var, api_secret)) if not value]
        if missing:
            raise ConfigurationError(f"missing environment variable(s): {', '.join(missing)}")
        return cls(api_key, api_secret)
