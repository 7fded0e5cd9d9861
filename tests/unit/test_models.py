"""Tests for response envelope types."""

from sportmonks_client.models import (
    Pagination,
    RateLimit,
    get_nested_include,
    has_data,
    has_include,
    is_paginated_payload,
    is_single_payload,
)


class TestPagination:

    def test_from_dict(self):
        pagination = Pagination.from_dict({
            "count": 25, "per_page": 25, "current_page": 1,
            "next_page": "https://api.sportmonks.com/v3/football/leagues?page=2",
            "has_more": True, "total": 112,
        })

        assert pagination.count == 25
        assert pagination.current_page == 1
        assert pagination.has_more is True
        assert pagination.extra == {"total": 112}

    def test_absent(self):
        assert Pagination.from_dict(None).has_more is False
        assert Pagination.from_dict("garbage") == Pagination()

    def test_missing_flag(self):
        assert Pagination.from_dict({"count": 1}).has_more is False


class TestRateLimit:

    def test_from_payload(self):
        payload = {"data": [], "rate_limit": {"resets_in_seconds": 1800, "remaining": 2999, "requested_entity": "Fixture"}}
        rate_limit = RateLimit.from_payload(payload)

        assert rate_limit.resets_in_seconds == 1800
        assert rate_limit.remaining == 2999
        assert rate_limit.requested_entity == "Fixture"
        assert rate_limit.extra == {}

    def test_non_numeric_reset_ignored(self):
        assert RateLimit.from_dict({"resets_in_seconds": "soon"}).resets_in_seconds is None
        assert RateLimit.from_dict({"resets_in_seconds": True}).resets_in_seconds is None

    def test_absent(self):
        assert RateLimit.from_payload({"data": []}) == RateLimit()
        assert RateLimit.from_payload([1, 2]) == RateLimit()


def test_is_paginated_payload():
    assert is_paginated_payload({"data": [], "pagination": {}}) is True
    assert is_paginated_payload({"data": [], "pagination": None}) is True
    assert is_paginated_payload({"data": {"id": 1}, "pagination": {}}) is False
    assert is_paginated_payload({"data": []}) is False
    assert is_paginated_payload([{"id": 1}]) is False


class TestPayloadGuards:

    def test_has_data(self):
        assert has_data({"data": []}) is True
        assert has_data({"data": None}) is False
        assert has_data({"message": "no data"}) is False
        assert has_data("data") is False

    def test_is_single_payload(self):
        assert is_single_payload({"data": {"id": 85}}) is True
        assert is_single_payload({"data": [{"id": 85}]}) is False
        assert is_single_payload({}) is False


class TestIncludes:

    team = {"id": 85, "name": "FC Copenhagen", "country": {"id": 320, "name": "Denmark"}, "venue": None}

    def test_has_include(self):
        assert has_include(self.team, "country") is True
        assert has_include(self.team, "venue") is False
        assert has_include(self.team, "coach") is False

    def test_get_nested_include(self):
        assert get_nested_include(self.team, "country") == {"id": 320, "name": "Denmark"}
        assert get_nested_include(self.team, "country", "name") == "Denmark"
        assert get_nested_include(self.team, "country", "code") is None
        assert get_nested_include(self.team, "venue", "name", default="unknown") == "unknown"
