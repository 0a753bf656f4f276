"""
Typed request and response models for the Letterboxd API.

Field names are snake_case in Python and camelCase on the wire. Request
fields that are not given are never sent, so the server applies its own
defaults. Response models accept any subset of their optional fields and
ignore keys they do not know about.

Entities are identified by their LID, the alphanumeric id that also forms
the path of an entity's boxd.it share link.
"""

from enum import Enum
from typing import Annotated, List as ListOf, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

Cursor = str

__all__ = [
    "FilmRequestSort",
    "FilmStatus",
    "FilmRelationshipType",
    "IncludeFriends",
    "ListRequestSort",
    "ListMemberRelationship",
    "ListStatus",
    "ListRequestFilter",
    "MemberFilmRelationshipsRequestSort",
    "MemberRelationshipType",
    "SearchMethod",
    "SearchResultType",
    "ContributionType",
    "ThirdPartyService",
    "FilmRelationshipUpdateMessageCode",
    "ListCreateMessageCode",
    "ListUpdateMessageCode",
    "AccessToken",
    "ImageSize",
    "Image",
    "Link",
    "Genre",
    "Service",
    "Tag",
    "Pronoun",
    "Message",
    "MemberSummary",
    "ContributorSummary",
    "Contributor",
    "FilmContributions",
    "FilmTrailer",
    "FilmIdentifier",
    "ListIdentifier",
    "FilmRelationship",
    "MemberFilmRelationship",
    "FilmSummary",
    "Film",
    "FilmsRequest",
    "FilmsResponse",
    "FilmServicesResponse",
    "GenresResponse",
    "FilmAvailability",
    "FilmAvailabilityResponse",
    "FilmStatisticsCounts",
    "RatingsHistogramBar",
    "FilmStatistics",
    "FilmRelationshipUpdateRequest",
    "FilmRelationshipUpdateResponse",
    "MemberFilmRelationshipsRequest",
    "MemberFilmRelationshipsResponse",
    "ListEntrySummary",
    "ListSummary",
    "List",
    "ListsRequest",
    "ListsResponse",
    "ListCreateEntry",
    "ListCreationRequest",
    "ListCreateResponse",
    "ListUpdateEntry",
    "ListUpdateRequest",
    "ListUpdateResponse",
    "ListEntriesRequest",
    "ListEntry",
    "ListEntriesResponse",
    "SearchRequest",
    "ContributorSearchItem",
    "FilmSearchItem",
    "ListSearchItem",
    "MemberSearchItem",
    "ReviewSearchItem",
    "TagSearchItem",
    "SearchResponse",
    "AbstractSearchItem",
    "Cursor",
]


class RequestModel(BaseModel):
    """
    Base class for query and body payloads.

    Optional fields that were never given are dropped when the model is
    dumped. A field explicitly set to ``None`` is kept.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode='wrap')
    def omit_unset_optionals(self, handler):
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if name not in self.model_fields_set and getattr(self, name) is None:
                data.pop(field.alias or name, None)
                data.pop(name, None)
        return data


class ResponseModel(BaseModel):
    """Base class for decoded responses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


# --- Enumerations ----------------------------------------------------------

class FilmRequestSort(str, Enum):
    FILM_NAME = "FilmName"
    RELEASE_DATE_LATEST_FIRST = "ReleaseDateLatestFirst"
    RELEASE_DATE_EARLIEST_FIRST = "ReleaseDateEarliestFirst"
    RATING_HIGH_TO_LOW = "RatingHighToLow"
    RATING_LOW_TO_HIGH = "RatingLowToHigh"
    FILM_DURATION_SHORTEST_FIRST = "FilmDurationShortestFirst"
    FILM_DURATION_LONGEST_FIRST = "FilmDurationLongestFirst"
    FILM_POPULARITY = "FilmPopularity"
    FILM_POPULARITY_THIS_WEEK = "FilmPopularityThisWeek"
    FILM_POPULARITY_THIS_MONTH = "FilmPopularityThisMonth"
    FILM_POPULARITY_THIS_YEAR = "FilmPopularityThisYear"
    FILM_POPULARITY_WITH_FRIENDS = "FilmPopularityWithFriends"
    FILM_POPULARITY_WITH_FRIENDS_THIS_WEEK = "FilmPopularityWithFriendsThisWeek"
    FILM_POPULARITY_WITH_FRIENDS_THIS_MONTH = "FilmPopularityWithFriendsThisMonth"
    FILM_POPULARITY_WITH_FRIENDS_THIS_YEAR = "FilmPopularityWithFriendsThisYear"


class FilmStatus(str, Enum):
    RELEASED = "Released"
    NOT_RELEASED = "NotReleased"
    IN_WATCHLIST = "InWatchlist"
    NOT_IN_WATCHLIST = "NotInWatchlist"
    WATCHED = "Watched"
    NOT_WATCHED = "NotWatched"
    FEATURE_LENGTH = "FeatureLength"
    NOT_FEATURE_LENGTH = "NotFeatureLength"


class FilmRelationshipType(str, Enum):
    WATCHED = "Watched"
    NOT_WATCHED = "NotWatched"
    LIKED = "Liked"
    NOT_LIKED = "NotLiked"
    IN_WATCHLIST = "InWatchlist"
    NOT_IN_WATCHLIST = "NotInWatchlist"
    FAVORITED = "Favorited"


class IncludeFriends(str, Enum):
    NONE = "None"
    ALL = "All"
    ONLY = "Only"


class ListRequestSort(str, Enum):
    DATE = "Date"
    WHEN_CREATED_LATEST_FIRST = "WhenCreatedLatestFirst"
    WHEN_CREATED_EARLIEST_FIRST = "WhenCreatedEarliestFirst"
    LIST_NAME = "ListName"
    LIST_POPULARITY = "ListPopularity"
    LIST_POPULARITY_THIS_WEEK = "ListPopularityThisWeek"
    LIST_POPULARITY_THIS_MONTH = "ListPopularityThisMonth"
    LIST_POPULARITY_THIS_YEAR = "ListPopularityThisYear"
    LIST_POPULARITY_WITH_FRIENDS = "ListPopularityWithFriends"
    LIST_POPULARITY_WITH_FRIENDS_THIS_WEEK = "ListPopularityWithFriendsThisWeek"
    LIST_POPULARITY_WITH_FRIENDS_THIS_MONTH = "ListPopularityWithFriendsThisMonth"
    LIST_POPULARITY_WITH_FRIENDS_THIS_YEAR = "ListPopularityWithFriendsThisYear"


class ListMemberRelationship(str, Enum):
    OWNER = "Owner"
    LIKED = "Liked"


class ListStatus(str, Enum):
    CLEAN = "Clean"
    PUBLISHED = "Published"
    NOT_PUBLISHED = "NotPublished"


class ListRequestFilter(str, Enum):
    NO_DUPLICATE_MEMBERS = "NoDuplicateMembers"


class MemberFilmRelationshipsRequestSort(str, Enum):
    DATE = "Date"
    NAME = "Name"
    MEMBER_POPULARITY = "MemberPopularity"
    MEMBER_POPULARITY_THIS_WEEK = "MemberPopularityThisWeek"
    MEMBER_POPULARITY_THIS_MONTH = "MemberPopularityThisMonth"
    MEMBER_POPULARITY_THIS_YEAR = "MemberPopularityThisYear"
    MEMBER_POPULARITY_WITH_FRIENDS = "MemberPopularityWithFriends"
    MEMBER_POPULARITY_WITH_FRIENDS_THIS_WEEK = "MemberPopularityWithFriendsThisWeek"
    MEMBER_POPULARITY_WITH_FRIENDS_THIS_MONTH = "MemberPopularityWithFriendsThisMonth"
    MEMBER_POPULARITY_WITH_FRIENDS_THIS_YEAR = "MemberPopularityWithFriendsThisYear"


class MemberRelationshipType(str, Enum):
    IS_FOLLOWING = "IsFollowing"
    IS_FOLLOWED_BY = "IsFollowedBy"


class SearchMethod(str, Enum):
    FULL_TEXT = "FullText"
    AUTOCOMPLETE = "Autocomplete"


class SearchResultType(str, Enum):
    CONTRIBUTOR_SEARCH_ITEM = "ContributorSearchItem"
    FILM_SEARCH_ITEM = "FilmSearchItem"
    LIST_SEARCH_ITEM = "ListSearchItem"
    MEMBER_SEARCH_ITEM = "MemberSearchItem"
    REVIEW_SEARCH_ITEM = "ReviewSearchItem"
    TAG_SEARCH_ITEM = "TagSearchItem"


class ContributionType(str, Enum):
    DIRECTOR = "Director"
    ACTOR = "Actor"
    PRODUCER = "Producer"
    WRITER = "Writer"
    EDITOR = "Editor"
    CINEMATOGRAPHY = "Cinematography"
    ART_DIRECTION = "ArtDirection"
    VISUAL_EFFECTS = "VisualEffects"
    COMPOSER = "Composer"
    SOUND = "Sound"
    COSTUMES = "Costumes"
    MAKE_UP = "MakeUp"
    STUDIO = "Studio"


class ThirdPartyService(str, Enum):
    FACEBOOK = "facebook"


class FilmRelationshipUpdateMessageCode(str, Enum):
    INVALID_RATING_VALUE = "InvalidRatingValue"
    UNABLE_TO_REMOVE_WATCH = "UnableToRemoveWatch"


class ListCreateMessageCode(str, Enum):
    LIST_NAME_IS_BLANK = "ListNameIsBlank"
    UNKNOWN_FILM_CODE = "UnknownFilmCode"
    INVALID_RATING_VALUE = "InvalidRatingValue"
    DUPLICATE_RANK = "DuplicateRank"
    EMPTY_PUBLIC_LIST = "EmptyPublicList"
    CLONE_SOURCE_NOT_FOUND = "CloneSourceNotFound"
    SHARING_SERVICE_NOT_AUTHORIZED = "SharingServiceNotAuthorized"
    CANNOT_SHARE_PRIVATE_LIST = "CannotSharePrivateList"
    LIST_DESCRIPTION_IS_TOO_LONG = "ListDescriptionIsTooLong"
    LIST_ENTRY_NOTES_TOO_LONG = "ListEntryNotesTooLong"


class ListUpdateMessageCode(str, Enum):
    LIST_NAME_IS_BLANK = "ListNameIsBlank"
    UNKNOWN_FILM_CODE = "UnknownFilmCode"
    INVALID_RATING_VALUE = "InvalidRatingValue"
    DUPLICATE_RANK = "DuplicateRank"
    EMPTY_PUBLIC_LIST = "EmptyPublicList"
    SHARING_SERVICE_NOT_AUTHORIZED = "SharingServiceNotAuthorized"
    CANNOT_SHARE_PRIVATE_LIST = "CannotSharePrivateList"
    LIST_DESCRIPTION_IS_TOO_LONG = "ListDescriptionIsTooLong"
    LIST_ENTRY_NOTES_TOO_LONG = "ListEntryNotesTooLong"


# --- Authentication --------------------------------------------------------

class AccessToken(BaseModel):
    """
    Bearer token returned by the password grant.

    Keys are snake_case on the wire, unlike the rest of the API.
    """

    access_token: str
    token_type: str = "bearer"
    refresh_token: str = ""
    expires_in: int = 0


# --- Shared response pieces ------------------------------------------------

class ImageSize(ResponseModel):
    width: int
    height: int
    url: str


class Image(ResponseModel):
    sizes: ListOf[ImageSize] = []


class Link(ResponseModel):
    """A URL to the entity on Letterboxd or an external site (tmdb, imdb...)."""

    type: str
    id: Optional[str] = None
    url: str


class Genre(ResponseModel):
    id: str
    name: str


class Service(ResponseModel):
    id: str
    name: str


class Tag(ResponseModel):
    code: str
    display_tag: Optional[str] = None


class Pronoun(ResponseModel):
    id: str
    label: Optional[str] = None
    subject_pronoun: Optional[str] = None
    object_pronoun: Optional[str] = None
    possessive_adjective: Optional[str] = None
    possessive_pronoun: Optional[str] = None
    reflexive: Optional[str] = None


class Message(ResponseModel):
    """
    Message the API client should show to the user.

    ``type`` is ``Error`` or ``Success``; errors carry a business-rule
    ``code`` (see the ``*MessageCode`` enums) and a human readable ``title``.
    """

    type: str
    code: Optional[str] = None
    title: Optional[str] = None


class MemberSummary(ResponseModel):
    id: str
    username: str
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    display_name: Optional[str] = None
    short_name: Optional[str] = None
    pronoun: Optional[Pronoun] = None
    avatar: Optional[Image] = None
    member_status: Optional[str] = None


class ContributorSummary(ResponseModel):
    id: str
    name: str
    character_name: Optional[str] = None


class Contributor(ResponseModel):
    id: str
    name: str
    statistics: Optional[dict] = None
    links: ListOf[Link] = []


class FilmContributions(ResponseModel):
    type: str
    contributors: ListOf[ContributorSummary] = []


class FilmTrailer(ResponseModel):
    id: str
    url: str


class FilmIdentifier(ResponseModel):
    id: str


class ListIdentifier(ResponseModel):
    id: str


# --- Films -----------------------------------------------------------------

class FilmRelationship(ResponseModel):
    watched: bool = False
    liked: bool = False
    favorited: bool = False
    in_watchlist: bool = False
    rating: Optional[float] = None
    reviews: ListOf[str] = []
    diary_entries: ListOf[str] = []


class MemberFilmRelationship(ResponseModel):
    member: MemberSummary
    relationship: FilmRelationship


class FilmSummary(ResponseModel):
    id: str
    name: str
    original_name: Optional[str] = None
    alternative_names: Optional[ListOf[str]] = None
    release_year: Optional[int] = None
    directors: ListOf[ContributorSummary] = []
    poster: Optional[Image] = None
    relationships: ListOf[MemberFilmRelationship] = []
    links: ListOf[Link] = []


class Film(ResponseModel):
    id: str
    name: str
    original_name: Optional[str] = None
    alternative_names: ListOf[str] = []
    release_year: Optional[int] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    run_time: Optional[int] = None
    poster: Optional[Image] = None
    backdrop: Optional[Image] = None
    backdrop_focal_point: Optional[float] = None
    trailer: Optional[FilmTrailer] = None
    genres: ListOf[Genre] = []
    contributions: ListOf[FilmContributions] = []
    links: ListOf[Link] = []


class FilmsRequest(RequestModel):
    cursor: Optional[Cursor] = None
    per_page: Optional[int] = None
    sort: Optional[FilmRequestSort] = None
    genre: Optional[str] = None
    decade: Optional[int] = None
    year: Optional[int] = None
    service: Optional[str] = None
    where: Optional[ListOf[FilmStatus]] = None
    member: Optional[str] = None
    member_relationship: Optional[FilmRelationshipType] = None
    include_friends: Optional[IncludeFriends] = None
    tag_code: Optional[str] = None
    tagger: Optional[str] = None
    include_tagger_friends: Optional[IncludeFriends] = None


class FilmsResponse(ResponseModel):
    next: Optional[Cursor] = None
    items: ListOf[FilmSummary] = []


class FilmServicesResponse(ResponseModel):
    items: ListOf[Service] = []


class GenresResponse(ResponseModel):
    items: ListOf[Genre] = []


class FilmAvailability(ResponseModel):
    service: str
    display_name: Optional[str] = None
    country: Optional[str] = None
    id: Optional[str] = None
    url: Optional[str] = None


class FilmAvailabilityResponse(ResponseModel):
    items: ListOf[FilmAvailability] = []


class FilmStatisticsCounts(ResponseModel):
    watches: int = 0
    likes: int = 0
    ratings: int = 0
    fans: int = 0
    lists: int = 0
    reviews: int = 0


class RatingsHistogramBar(ResponseModel):
    rating: float
    normalized_weight: Optional[float] = None
    count: int = 0


class FilmStatistics(ResponseModel):
    film: FilmIdentifier
    counts: FilmStatisticsCounts = FilmStatisticsCounts()
    rating: Optional[float] = None
    ratings_histogram: ListOf[RatingsHistogramBar] = []


class FilmRelationshipUpdateRequest(RequestModel):
    """
    Partial update of the authenticated member's relationship to a film.

    Only the fields that are set are sent.
    """

    watched: Optional[bool] = None
    liked: Optional[bool] = None
    in_watchlist: Optional[bool] = None
    rating: Optional[float] = None


class FilmRelationshipUpdateResponse(ResponseModel):
    data: FilmRelationship
    messages: ListOf[Message] = []


class MemberFilmRelationshipsRequest(RequestModel):
    cursor: Optional[Cursor] = None
    per_page: Optional[int] = None
    sort: Optional[MemberFilmRelationshipsRequestSort] = None
    member: Optional[str] = None
    member_relationship: Optional[MemberRelationshipType] = None
    film_relationship: Optional[FilmRelationshipType] = None


class MemberFilmRelationshipsResponse(ResponseModel):
    next: Optional[Cursor] = None
    items: ListOf[MemberFilmRelationship] = []


# --- Lists -----------------------------------------------------------------

class ListEntrySummary(ResponseModel):
    rank: Optional[int] = None
    film: FilmSummary


class ListSummary(ResponseModel):
    id: str
    name: str
    film_count: int = 0
    published: bool = False
    ranked: bool = False
    description_lbml: Optional[str] = None
    description_truncated: Optional[bool] = None
    owner: Optional[MemberSummary] = None
    cloned_from: Optional[ListIdentifier] = None
    preview_entries: ListOf[ListEntrySummary] = []
    description: Optional[str] = None


class List(ResponseModel):
    id: str
    name: str
    film_count: int = 0
    published: bool = False
    ranked: bool = False
    has_entries_with_notes: bool = False
    description_lbml: Optional[str] = None
    tags2: ListOf[Tag] = []
    can_share_on: ListOf[str] = []
    shared_on: ListOf[str] = []
    when_created: Optional[str] = None
    when_published: Optional[str] = None
    owner: Optional[MemberSummary] = None
    cloned_from: Optional[ListIdentifier] = None
    preview_entries: ListOf[ListEntrySummary] = []
    links: ListOf[Link] = []
    description: Optional[str] = None


class ListsRequest(RequestModel):
    cursor: Optional[Cursor] = None
    per_page: Optional[int] = None
    sort: Optional[ListRequestSort] = None
    film: Optional[str] = None
    cloned_from: Optional[str] = None
    tag_code: Optional[str] = None
    member: Optional[str] = None
    member_relationship: Optional[ListMemberRelationship] = None
    include_friends: Optional[IncludeFriends] = None
    where: Optional[ListOf[ListStatus]] = None
    filter: Optional[ListOf[ListRequestFilter]] = None


class ListsResponse(ResponseModel):
    next: Optional[Cursor] = None
    items: ListOf[ListSummary] = []


class ListCreateEntry(RequestModel):
    film: str
    rank: Optional[int] = None
    notes: Optional[str] = None
    contains_spoilers: Optional[bool] = None


class ListCreationRequest(RequestModel):
    name: str
    published: bool = False
    ranked: bool = False
    description: Optional[str] = None
    cloned_from: Optional[str] = None
    tags: Optional[ListOf[str]] = None
    entries: Optional[ListOf[ListCreateEntry]] = None
    share: Optional[ListOf[ThirdPartyService]] = None


class ListCreateResponse(ResponseModel):
    data: List
    messages: ListOf[Message] = []


class ListUpdateEntry(RequestModel):
    film: str
    rank: Optional[int] = None
    notes: Optional[str] = None
    contains_spoilers: Optional[bool] = None


class ListUpdateRequest(RequestModel):
    name: str
    published: Optional[bool] = None
    ranked: Optional[bool] = None
    description: Optional[str] = None
    tags: Optional[ListOf[str]] = None
    films_to_remove: Optional[ListOf[str]] = None
    entries: Optional[ListOf[ListUpdateEntry]] = None
    share: Optional[ListOf[ThirdPartyService]] = None


class ListUpdateResponse(ResponseModel):
    data: List
    messages: ListOf[Message] = []


class ListEntriesRequest(RequestModel):
    cursor: Optional[Cursor] = None
    per_page: Optional[int] = None
    sort: Optional[FilmRequestSort] = None
    genre: Optional[str] = None
    decade: Optional[int] = None
    year: Optional[int] = None
    service: Optional[str] = None
    where: Optional[ListOf[FilmStatus]] = None
    member: Optional[str] = None
    member_relationship: Optional[FilmRelationshipType] = None
    include_friends: Optional[IncludeFriends] = None
    tag_code: Optional[str] = None
    tagger: Optional[str] = None
    include_tagger_friends: Optional[IncludeFriends] = None


class ListEntry(ResponseModel):
    rank: Optional[int] = None
    notes_lbml: Optional[str] = None
    contains_spoilers: Optional[bool] = None
    film: FilmSummary
    notes: Optional[str] = None


class ListEntriesResponse(ResponseModel):
    next: Optional[Cursor] = None
    items: ListOf[ListEntry] = []


# --- Search ----------------------------------------------------------------

class SearchRequest(RequestModel):
    input: str
    cursor: Optional[Cursor] = None
    per_page: Optional[int] = None
    search_method: Optional[SearchMethod] = None
    include: Optional[ListOf[SearchResultType]] = None
    contribution_type: Optional[ContributionType] = None


class ContributorSearchItem(ResponseModel):
    type: Literal["ContributorSearchItem"] = "ContributorSearchItem"
    score: Optional[float] = None
    contributor: Contributor


class FilmSearchItem(ResponseModel):
    type: Literal["FilmSearchItem"] = "FilmSearchItem"
    score: Optional[float] = None
    film: FilmSummary


class ListSearchItem(ResponseModel):
    type: Literal["ListSearchItem"] = "ListSearchItem"
    score: Optional[float] = None
    list: ListSummary


class MemberSearchItem(ResponseModel):
    type: Literal["MemberSearchItem"] = "MemberSearchItem"
    score: Optional[float] = None
    member: MemberSummary


class ReviewSearchItem(ResponseModel):
    type: Literal["ReviewSearchItem"] = "ReviewSearchItem"
    score: Optional[float] = None
    review: dict


class TagSearchItem(ResponseModel):
    type: Literal["TagSearchItem"] = "TagSearchItem"
    score: Optional[float] = None
    tag: str


AbstractSearchItem = Annotated[
    Union[
        ContributorSearchItem,
        FilmSearchItem,
        ListSearchItem,
        MemberSearchItem,
        ReviewSearchItem,
        TagSearchItem,
    ],
    Field(discriminator='type'),
]


class SearchResponse(ResponseModel):
    next: Optional[Cursor] = None
    items: ListOf[AbstractSearchItem] = []
