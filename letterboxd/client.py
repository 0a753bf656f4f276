"""
Letterboxd API client.

Every request is signed with the API key pair as described in
``letterboxd.signer`` and sent over a pooled ``requests.Session``. Calls
return typed models on 2xx responses and raise a ``LetterboxdError``
subclass otherwise.
"""

import logging
import re
import time
from typing import Optional, Tuple, Type, TypeVar, Union
from urllib.parse import urlencode, urlsplit

import requests
from pydantic import BaseModel
from requests.adapters import HTTPAdapter
from requests.utils import unquote_unreserved

from . import codec, endpoints, models, signer
from .constants import (
    API_BASE_URL,
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG
)
from .credentials import ApiKeyPair
from .exceptions import (
    ConfigurationError,
    ServerError,
    TransportError,
    UriError
)

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=BaseModel)

# RFC 3986 characters, with "%" only as part of a percent escape
_VALID_URI = re.compile(r"^(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})*$")


class Client:
    """
    Client for the Letterboxd API.

    A client is always created from an API key pair. If it holds an access
    token, calls to endpoints that require a member are authenticated with
    it. A token is obtained with ``Client.authenticate`` or supplied
    directly, e.g. after caching it from an earlier session.
    """

    def __init__(self, api_key_pair: ApiKeyPair, token: Optional[models.AccessToken] = None,
                 base_url: str = API_BASE_URL, session: Optional[requests.Session] = None, **config):
        """
        Initialize the client.

        Args:
            api_key_pair: API key and secret used to sign requests
            token: Optional access token for authenticated endpoints
            base_url: API root, e.g. a fixture server in tests
            session: Optional requests session to send requests with. It is
                used as given: pool_connections, pool_maxsize and user_agent
                only configure a session the client creates itself.
            **config: Configuration options (timeout, pool_connections,
                pool_maxsize, verify, user_agent)
        """
        if not base_url:
            raise ConfigurationError("base_url cannot be empty")
        self.api_key_pair = api_key_pair
        self.base_url = base_url.rstrip('/') + '/'
        self._token = token

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config['pool_connections'],
                pool_maxsize=self.config['pool_maxsize']
            )
            session.mount('https://', adapter)
            session.mount('http://', adapter)
            session.headers['User-Agent'] = self.config['user_agent']
        self.session = session

    def _validate_config(self):
        """Validate client configuration."""
        if not isinstance(self.api_key_pair, ApiKeyPair):
            raise ConfigurationError("api_key_pair must be an ApiKeyPair")

        timeout = self.config['timeout']
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be positive or None")

        if self.config['pool_connections'] <= 0:
            raise ConfigurationError("pool_connections must be positive")

        if self.config['pool_maxsize'] <= 0:
            raise ConfigurationError("pool_maxsize must be positive")

    @classmethod
    def with_token(cls, api_key_pair: ApiKeyPair, token: models.AccessToken, **kwargs) -> "Client":
        """Create a client bound to an existing access token."""
        return cls(api_key_pair, token=token, **kwargs)

    @classmethod
    def authenticate(cls, api_key_pair: ApiKeyPair, username: str, password: str, **kwargs) -> "Client":
        """
        Create a client and sign the member in with the password grant.

        Args:
            api_key_pair: API key and secret
            username: Member username or email address
            password: Member password
            **kwargs: Passed on to ``Client()``

        Returns:
            A client holding the issued access token

        Raises:
            ServerError: If the credentials are rejected
            LetterboxdError: On any other failure
        """
        client = cls(api_key_pair, **kwargs)
        try:
            client.set_token(client._request_token(username, password))
        except Exception:
            client.close()
            raise
        return client

    def _request_token(self, username: str, password: str) -> models.AccessToken:
        body = urlencode({
            'grant_type': 'password',
            'username': username,
            'password': password
        })
        headers = {
            'Content-Type': CONTENT_TYPE_FORM,
            'Accept': CONTENT_TYPE_JSON
        }
        endpoint = endpoints.AUTH_TOKEN
        data, url = self._send(endpoint.method, endpoint.path, "", body, headers)
        return codec.decode(endpoint.response, data, url)

    @property
    def token(self) -> Optional[models.AccessToken]:
        """The access token, if the client is authenticated."""
        return self._token

    def set_token(self, token: Union[models.AccessToken, str, None]):
        """
        Replace the access token.

        A bare string is taken as the ``access_token`` of a bearer token.
        ``None`` makes the client unauthenticated.
        """
        if isinstance(token, str):
            token = models.AccessToken(access_token=token)
        self._token = token

    def execute(self, method: str, endpoint: str, query=None, body=None,
                requires_auth: bool = False) -> bytes:
        """
        Perform one signed request and return the raw response body.

        Args:
            method: HTTP method
            endpoint: Path relative to ``base_url``, e.g. "film/2a9q"
            query: Request model, mapping or encoded string for the query
            body: Request model or mapping sent as JSON
            requires_auth: Attach the bearer token, if one is held

        Returns:
            Response body bytes of a 2xx response

        Raises:
            EncodingError: If query or body cannot be serialized
            UriError: If the signed URL is not a valid URI
            TransportError: If the HTTP request fails
            ServerError: If the status code is not 2xx
        """
        data, _ = self._execute(method, endpoint, query, body, requires_auth)
        return data

    def _execute(self, method: str, endpoint: str, query=None, body=None,
                 requires_auth: bool = False) -> Tuple[bytes, str]:
        query_string = codec.encode_query(query)
        body_text = codec.encode_body(body)

        headers = {'Content-Type': CONTENT_TYPE_JSON}
        if requires_auth and self._token is not None:
            headers['Authorization'] = f"Bearer {self._token.access_token}"

        return self._send(method, endpoint, query_string, body_text, headers)

    def _send(self, method: str, endpoint: str, query_string: str, body: str,
              headers: dict) -> Tuple[bytes, str]:
        """
        Sign, send and check the status of a single request.

        Returns the response body and the signed URL it was sent to.
        """
        method = method.upper()
        # requests decodes escaped unreserved characters when it prepares the
        # URL, so the signed URL must already be in that form
        try:
            endpoint = unquote_unreserved(endpoint)
            query_string = unquote_unreserved(query_string)
        except requests.exceptions.InvalidURL as e:
            raise UriError(f"invalid request URL: {e}", self.base_url + endpoint) from e

        url = signer.generate_signed_url(method, self.base_url, endpoint, query_string, body, self.api_key_pair)
        self._check_uri(url)

        body_bytes = body.encode('utf-8')
        headers['Content-Length'] = str(len(body_bytes))

        logger.debug("%s %s", method, endpoint)
        started = time.monotonic()
        try:
            response = self.session.request(
                method,
                url,
                data=body_bytes or None,
                headers=headers,
                timeout=self.config['timeout'],
                verify=self.config['verify']
            )
        except requests.exceptions.InvalidURL as e:
            raise UriError(f"invalid request URL: {e}", url) from e
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", url) from e

        logger.debug("%s %s -> %s (%.3fs)", method, endpoint, response.status_code,
                     time.monotonic() - started)

        if not 200 <= response.status_code < 300:
            text = response.content.decode('utf-8', errors='replace')
            raise ServerError(response.status_code, text, url)
        return response.content, url

    @staticmethod
    def _check_uri(url: str):
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise UriError(f"invalid request URL: {e}", url) from e

        if parts.scheme not in ('http', 'https') or not parts.netloc:
            raise UriError("request URL needs an http(s) scheme and host", url)
        if not _VALID_URI.match(url):
            raise UriError("request URL contains characters not allowed in a URI", url)

    def get(self, endpoint: str, response_model: Type[ModelT], query=None,
            requires_auth: bool = False) -> ModelT:
        """Make a signed GET request and decode the response."""
        data, url = self._execute('GET', endpoint, query=query, requires_auth=requires_auth)
        return codec.decode(response_model, data, url)

    def post(self, endpoint: str, response_model: Type[ModelT], body, requires_auth: bool = True) -> ModelT:
        """Make a signed, authenticated POST request and decode the response."""
        data, url = self._execute('POST', endpoint, body=body, requires_auth=requires_auth)
        return codec.decode(response_model, data, url)

    def patch(self, endpoint: str, response_model: Type[ModelT], body, requires_auth: bool = True) -> ModelT:
        """Make a signed, authenticated PATCH request and decode the response."""
        data, url = self._execute('PATCH', endpoint, body=body, requires_auth=requires_auth)
        return codec.decode(response_model, data, url)

    def delete(self, endpoint: str, requires_auth: bool = True):
        """Make a signed, authenticated DELETE request. The response body is discarded."""
        self.execute('DELETE', endpoint, requires_auth=requires_auth)

    def _call(self, endpoint: endpoints.Endpoint, *path_args: str, request=None):
        path = endpoint.format_path(*path_args)
        if endpoint.method == 'GET':
            return self.get(path, endpoint.response, query=request, requires_auth=endpoint.requires_auth)
        if endpoint.method == 'POST':
            return self.post(path, endpoint.response, request, requires_auth=endpoint.requires_auth)
        if endpoint.method == 'PATCH':
            return self.patch(path, endpoint.response, request, requires_auth=endpoint.requires_auth)
        if endpoint.method == 'DELETE':
            return self.delete(path, requires_auth=endpoint.requires_auth)
        raise ValueError(f"unsupported method: {endpoint.method}")

    # Films

    def films(self, request: Optional[models.FilmsRequest] = None) -> models.FilmsResponse:
        """A cursored window over the list of films."""
        return self._call(endpoints.FILMS, request=request)

    def film_services(self) -> models.FilmServicesResponse:
        """Services supported by the /films endpoint."""
        return self._call(endpoints.FILM_SERVICES)

    def film_genres(self) -> models.GenresResponse:
        return self._call(endpoints.FILM_GENRES)

    def film(self, film_id: str) -> models.Film:
        """Details of the film with the given LID."""
        return self._call(endpoints.FILM, film_id)

    def film_availability(self, film_id: str) -> models.FilmAvailabilityResponse:
        return self._call(endpoints.FILM_AVAILABILITY, film_id)

    def film_relationship(self, film_id: str) -> models.FilmRelationship:
        """The authenticated member's relationship to a film."""
        return self._call(endpoints.FILM_RELATIONSHIP, film_id)

    def update_film_relationship(self, film_id: str, request: models.FilmRelationshipUpdateRequest
                                 ) -> models.FilmRelationshipUpdateResponse:
        """Update the authenticated member's relationship to a film."""
        return self._call(endpoints.UPDATE_FILM_RELATIONSHIP, film_id, request=request)

    def film_relationship_members(self, film_id: str,
                                  request: Optional[models.MemberFilmRelationshipsRequest] = None
                                  ) -> models.MemberFilmRelationshipsResponse:
        """Members with a relationship to a film, e.g. who watched it."""
        return self._call(endpoints.FILM_RELATIONSHIP_MEMBERS, film_id, request=request)

    def film_statistics(self, film_id: str) -> models.FilmStatistics:
        return self._call(endpoints.FILM_STATISTICS, film_id)

    # Lists

    def lists(self, request: Optional[models.ListsRequest] = None) -> models.ListsResponse:
        """A cursored window over lists."""
        return self._call(endpoints.LISTS, request=request)

    def create_list(self, request: models.ListCreationRequest) -> models.ListCreateResponse:
        return self._call(endpoints.CREATE_LIST, request=request)

    def list(self, list_id: str) -> models.List:
        """Details of the list with the given LID."""
        return self._call(endpoints.LIST, list_id)

    def update_list(self, list_id: str, request: models.ListUpdateRequest) -> models.ListUpdateResponse:
        return self._call(endpoints.UPDATE_LIST, list_id, request=request)

    def delete_list(self, list_id: str):
        """Delete a list owned by the authenticated member."""
        return self._call(endpoints.DELETE_LIST, list_id)

    def list_entries(self, list_id: str, request: Optional[models.ListEntriesRequest] = None
                     ) -> models.ListEntriesResponse:
        return self._call(endpoints.LIST_ENTRIES, list_id, request=request)

    # Search

    def search(self, request: models.SearchRequest) -> models.SearchResponse:
        """Search films, lists, members, reviews, contributors and tags."""
        return self._call(endpoints.SEARCH, request=request)

    def close(self):
        """Close the HTTP session if the client created it."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
