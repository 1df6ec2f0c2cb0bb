"""Tests for per-tool argument decoding."""

import pytest

from watchbase_mcp.arguments import (
    ListBrandsArguments,
    ListFamiliesArguments,
    ListWatchesArguments,
    SearchArguments,
    WatchDetailsArguments,
    validate_arguments,
)
from watchbase_mcp.protocol import ProtocolError, INVALID_PARAMS, METHOD_NOT_FOUND


def assert_rejected(name, arguments):
    with pytest.raises(ProtocolError) as info:
        validate_arguments(name, arguments)
    assert info.value.code == INVALID_PARAMS
    assert name in info.value.message


class TestSearch:

    @pytest.mark.parametrize("name", ["search", "search_refnr"])
    def test_accepts_string_query(self, name):
        args = validate_arguments(name, {"q": "x"})
        assert isinstance(args, SearchArguments)
        assert args.q == "x"

    @pytest.mark.parametrize("name", ["search", "search_refnr"])
    @pytest.mark.parametrize("bad", [{}, {"q": 5}, None, {"q": None}, ["q"], "q"])
    def test_rejects_bad_shapes(self, name, bad):
        assert_rejected(name, bad)

    def test_empty_query_passes(self):
        assert validate_arguments("search", {"q": ""}).q == ""

    def test_extra_keys_ignored(self):
        args = validate_arguments("search", {"q": "speedmaster", "limit": 3})
        assert args.q == "speedmaster"


class TestListBrands:

    @pytest.mark.parametrize("anything", [None, {}, {"foo": 1}, [1, 2], "junk"])
    def test_accepts_any_bag(self, anything):
        assert isinstance(validate_arguments("list_brands", anything), ListBrandsArguments)


class TestListFamilies:

    @pytest.mark.parametrize("brand_id", ["12", 12, 12.5])
    def test_accepts_string_or_number(self, brand_id):
        args = validate_arguments("list_families", {"brand_id": brand_id})
        assert isinstance(args, ListFamiliesArguments)
        assert args.brand_id == brand_id
        assert type(args.brand_id) is type(brand_id)

    @pytest.mark.parametrize("bad", [{}, {"brand_id": None}, {"brand_id": True},
                                     {"brand_id": [1]}, {"brand_id": {"id": 1}}, None])
    def test_rejects(self, bad):
        assert_rejected("list_families", bad)


class TestListWatches:

    def test_brand_only(self):
        args = validate_arguments("list_watches", {"brand_id": "1"})
        assert isinstance(args, ListWatchesArguments)
        assert args.family_id is None
        assert args.updated_since is None

    def test_all_fields(self):
        args = validate_arguments(
            "list_watches",
            {"brand_id": 1, "family_id": "2", "updated_since": "2024-01-05"},
        )
        assert args.brand_id == 1
        assert args.family_id == "2"
        assert args.updated_since == "2024-01-05"

    def test_date_is_checked_lexically_only(self):
        args = validate_arguments(
            "list_watches", {"brand_id": "1", "updated_since": "9999-99-99"}
        )
        assert args.updated_since == "9999-99-99"

    @pytest.mark.parametrize("bad_date", [
        "01-05-2024",
        "2024-1-05",
        "2024/01/05",
        "2024-01-05T00:00:00",
        "",
        "２０２４-01-05",
        20240105,
    ])
    def test_rejects_wrong_date_format(self, bad_date):
        assert_rejected("list_watches", {"brand_id": "1", "updated_since": bad_date})

    def test_rejects_missing_brand(self):
        assert_rejected("list_watches", {"family_id": "2"})

    def test_rejects_null_optional(self):
        assert_rejected("list_watches", {"brand_id": "1", "family_id": None})
        assert_rejected("list_watches", {"brand_id": "1", "updated_since": None})

    def test_rejects_boolean_family(self):
        assert_rejected("list_watches", {"brand_id": "1", "family_id": False})


class TestWatchDetails:

    def test_numeric_id_keeps_its_type(self):
        args = validate_arguments("get_watch_details", {"id": 42})
        assert isinstance(args, WatchDetailsArguments)
        assert args.id == 42
        assert isinstance(args.id, int)

    def test_string_id(self):
        assert validate_arguments("get_watch_details", {"id": "42"}).id == "42"

    @pytest.mark.parametrize("bad", [{}, {"id": None}, {"id": True}, None])
    def test_rejects(self, bad):
        assert_rejected("get_watch_details", bad)


def test_unknown_tool():
    with pytest.raises(ProtocolError) as info:
        validate_arguments("does_not_exist", {})
    assert info.value.code == METHOD_NOT_FOUND


def test_decoded_arguments_are_immutable():
    args = validate_arguments("search", {"q": "x"})
    with pytest.raises(Exception):
        args.q = "y"
