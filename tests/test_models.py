"""
Unit tests for response models.
"""

import json

import pytest

from letterboxd import codec, models


def _decode(model, payload):
    return codec.decode(model, json.dumps(payload).encode('utf-8'))


class TestResponseModels:
    """Test that responses decode from minimal and full documents."""

    @pytest.mark.parametrize("model,payload", [
        (models.FilmsResponse, {}),
        (models.FilmServicesResponse, {}),
        (models.GenresResponse, {}),
        (models.FilmAvailabilityResponse, {}),
        (models.ListsResponse, {}),
        (models.ListEntriesResponse, {}),
        (models.SearchResponse, {}),
        (models.MemberFilmRelationshipsResponse, {}),
        (models.FilmRelationship, {}),
        (models.Film, {"id": "2a9q", "name": "Fight Club"}),
        (models.FilmSummary, {"id": "2a9q", "name": "Fight Club"}),
        (models.List, {"id": "1fKte", "name": "Collection"}),
        (models.FilmStatistics, {"film": {"id": "2a9q"}}),
        (models.FilmRelationshipUpdateResponse, {"data": {}}),
        (models.ListUpdateResponse, {"data": {"id": "x", "name": "n"}}),
        (models.ListCreateResponse, {"data": {"id": "x", "name": "n"}}),
        (models.AccessToken, {"access_token": "t"}),
    ])
    def test_required_fields_only(self, model, payload):
        """Test decoding with every optional field absent."""
        assert isinstance(_decode(model, payload), model)

    def test_unknown_fields_ignored(self):
        """Test that fields the model does not know are ignored."""
        film = _decode(models.Film, {"id": "2a9q", "name": "Fight Club", "adult": False})

        assert film.name == "Fight Club"

    def test_film_full(self):
        """Test decoding a film with nested values."""
        film = _decode(models.Film, {
            "id": "2a9q",
            "name": "Fight Club",
            "releaseYear": 1999,
            "runTime": 139,
            "alternativeNames": ["El club de la pelea"],
            "genres": [{"id": "8b", "name": "Drama"}],
            "poster": {"sizes": [{"width": 70, "height": 105, "url": "https://a/p.jpg"}]},
            "trailer": {"id": "ICp4g9p_rgo", "url": "https://www.youtube.com/watch?v=ICp4g9p_rgo"},
            "links": [{"type": "letterboxd", "id": "2a9q", "url": "https://boxd.it/2a9q"}],
        })

        assert film.release_year == 1999
        assert film.run_time == 139
        assert film.genres[0].name == "Drama"
        assert film.poster.sizes[0].width == 70
        assert film.links[0].type == "letterboxd"

    def test_search_items_by_type(self):
        """Test that search items decode by their type tag."""
        resp = _decode(models.SearchResponse, {
            "next": "start=1",
            "items": [
                {"type": "FilmSearchItem", "score": 1.5, "film": {"id": "2a9q", "name": "Fight Club"}},
                {"type": "TagSearchItem", "score": 0.1, "tag": "fight"},
                {"type": "MemberSearchItem", "member": {"id": "m1", "username": "tyler"}},
            ],
        })

        assert resp.next == "start=1"
        assert isinstance(resp.items[0], models.FilmSearchItem)
        assert resp.items[0].film.name == "Fight Club"
        assert isinstance(resp.items[1], models.TagSearchItem)
        assert resp.items[2].member.username == "tyler"

    def test_update_messages(self):
        """Test business-rule messages on update responses."""
        resp = _decode(models.FilmRelationshipUpdateResponse, {
            "data": {"watched": True, "rating": 4.5},
            "messages": [{"type": "Error", "code": "InvalidRatingValue", "title": "Invalid rating"}],
        })

        message = resp.messages[0]
        assert message.code == models.FilmRelationshipUpdateMessageCode.INVALID_RATING_VALUE
        assert resp.data.watched is True
        assert resp.data.in_watchlist is False

    def test_populate_by_field_name(self):
        """Test that models accept snake_case names in Python."""
        request = models.SearchRequest(input="x", per_page=5)

        assert request.per_page == 5
