"""Tests for argument → upstream request translation."""

import pytest

from watchbase_mcp.arguments import validate_arguments
from watchbase_mcp.protocol import ProtocolError, METHOD_NOT_FOUND
from watchbase_mcp.translator import UpstreamRequest, translate, upstream_param_name


def build(name, arguments):
    return translate(name, validate_arguments(name, arguments))


@pytest.mark.parametrize("name, arguments, path, params", [
    ("search", {"q": "submariner"}, "search", {"q": "submariner"}),
    ("search_refnr", {"q": "116610"}, "search/refnr", {"q": "116610"}),
    ("list_brands", {}, "brands", {}),
    ("list_families", {"brand_id": 7}, "families", {"brand-id": 7}),
    ("list_watches", {"brand_id": "7"}, "watches", {"brand-id": "7"}),
    ("get_watch_details", {"id": 42}, "watch", {"id": 42}),
])
def test_translation_table(name, arguments, path, params):
    assert build(name, arguments) == UpstreamRequest(path, params)


class TestListWatches:

    def test_brand_only_sends_exactly_brand_id(self):
        request = build("list_watches", {"brand_id": "1"})
        assert set(request.params) == {"brand-id"}

    def test_family_adds_exactly_family_id(self):
        request = build("list_watches", {"brand_id": "1", "family_id": 2})
        assert set(request.params) == {"brand-id", "family-id"}
        assert request.params["family-id"] == 2

    def test_updated_since_renamed(self):
        request = build("list_watches", {"brand_id": "1", "updated_since": "2024-01-05"})
        assert request.params == {"brand-id": "1", "updated-since": "2024-01-05"}

    def test_all_fields(self):
        request = build(
            "list_watches",
            {"brand_id": 1, "family_id": "2", "updated_since": "2024-01-05"},
        )
        assert request.params == {
            "brand-id": 1,
            "family-id": "2",
            "updated-since": "2024-01-05",
        }


def test_list_brands_ignores_whatever_was_sent():
    assert build("list_brands", {"brand_id": 1, "q": "x"}).params == {}


def test_empty_search_query_is_forwarded():
    assert build("search", {"q": ""}).params == {"q": ""}


def test_no_translator_emits_none_values():
    for name, arguments in [
        ("search", {"q": "x"}),
        ("list_brands", None),
        ("list_families", {"brand_id": "1"}),
        ("list_watches", {"brand_id": "1"}),
        ("get_watch_details", {"id": "1"}),
    ]:
        assert None not in build(name, arguments).params.values()


def test_upstream_param_name():
    assert upstream_param_name("brand_id") == "brand-id"
    assert upstream_param_name("updated_since") == "updated-since"
    assert upstream_param_name("q") == "q"


def test_unknown_tool():
    with pytest.raises(ProtocolError) as info:
        translate("does_not_exist", validate_arguments("list_brands", {}))
    assert info.value.code == METHOD_NOT_FOUND


class TestNumericIds:

    def test_integral_float_sent_as_int(self):
        request = build("get_watch_details", {"id": 1.0})
        assert request.params == {"id": 1}
        assert type(request.params["id"]) is int

    def test_fractional_float_kept(self):
        assert build("get_watch_details", {"id": 1.5}).params == {"id": 1.5}

    def test_integral_float_brand_and_family(self):
        request = build("list_watches", {"brand_id": 7.0, "family_id": 12.0})
        assert request.params == {"brand-id": 7, "family-id": 12}
        assert all(type(v) is int for v in request.params.values())

    def test_strings_untouched(self):
        assert build("list_families", {"brand_id": "1.0"}).params == {"brand-id": "1.0"}
