"""
Table of the API endpoints exposed by ``Client``.

Each entry names the HTTP method, the path template (``{id}`` is replaced
by an LID), the request and response models, and whether the bearer token
is attached. ``Client`` turns an entry into a call through one generic code
path; there is no per-endpoint plumbing.
"""

from typing import NamedTuple, Optional, Type

from pydantic import BaseModel

from . import models
from .constants import AUTH_TOKEN_ENDPOINT


class Endpoint(NamedTuple):
    method: str
    path: str
    request: Optional[Type[BaseModel]] = None
    response: Optional[Type[BaseModel]] = None
    requires_auth: bool = False

    def format_path(self, *args: str) -> str:
        """Interpolate path parameters, in order, into the template."""
        return self.path.format(*args) if args else self.path


AUTH_TOKEN = Endpoint('POST', AUTH_TOKEN_ENDPOINT, response=models.AccessToken)

# Films
FILMS = Endpoint('GET', 'films', models.FilmsRequest, models.FilmsResponse)
FILM_SERVICES = Endpoint('GET', 'films/film-services', response=models.FilmServicesResponse)
FILM_GENRES = Endpoint('GET', 'films/genres', response=models.GenresResponse)
FILM = Endpoint('GET', 'film/{}', response=models.Film)
FILM_AVAILABILITY = Endpoint('GET', 'film/{}/availability', response=models.FilmAvailabilityResponse)
FILM_RELATIONSHIP = Endpoint('GET', 'film/{}/me', response=models.FilmRelationship, requires_auth=True)
UPDATE_FILM_RELATIONSHIP = Endpoint(
    'PATCH', 'film/{}/me',
    models.FilmRelationshipUpdateRequest, models.FilmRelationshipUpdateResponse,
    requires_auth=True,
)
FILM_RELATIONSHIP_MEMBERS = Endpoint(
    'GET', 'film/{}/members',
    models.MemberFilmRelationshipsRequest, models.MemberFilmRelationshipsResponse,
    requires_auth=True,
)
FILM_STATISTICS = Endpoint('GET', 'film/{}/statistics', response=models.FilmStatistics)

# Lists
LISTS = Endpoint('GET', 'lists', models.ListsRequest, models.ListsResponse)
CREATE_LIST = Endpoint('POST', 'lists', models.ListCreationRequest, models.ListCreateResponse, requires_auth=True)
LIST = Endpoint('GET', 'list/{}', response=models.List)
UPDATE_LIST = Endpoint('PATCH', 'list/{}', models.ListUpdateRequest, models.ListUpdateResponse, requires_auth=True)
DELETE_LIST = Endpoint('DELETE', 'list/{}', requires_auth=True)
LIST_ENTRIES = Endpoint('GET', 'list/{}/entries', models.ListEntriesRequest, models.ListEntriesResponse)

# Search
SEARCH = Endpoint('GET', 'search', models.SearchRequest, models.SearchResponse)
