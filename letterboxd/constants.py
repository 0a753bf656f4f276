"""
Constants for the Letterboxd client library.
Compatible with the Letterboxd API v0 request signing scheme.
"""

__version__ = "0.4.0"

API_BASE_URL = "https://api.letterboxd.com/api/v0/"

# Environment variables read by ApiKeyPair.from_env()
ENV_API_KEY = "LETTERBOXD_API_KEY"
ENV_API_SECRET = "LETTERBOXD_API_SECRET"

# Endpoint used for the password grant
AUTH_TOKEN_ENDPOINT = "auth/token"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,           # HTTP timeout in seconds, None disables it
    'pool_connections': 4,   # connection pools cached by the HTTP adapter
    'pool_maxsize': 10,      # connections kept per pool
    'verify': True,          # TLS certificate verification
    'user_agent': f"letterboxd-python/{__version__}",
}
