"""
Request Translator: validated arguments → upstream path + query params

The WatchBase API spells multi-word parameters with hyphens
(brand-id, family-id, updated-since); tool arguments use snake_case.
Optional arguments that were not supplied never become parameters.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from .arguments import (
    ListBrandsArguments,
    ListFamiliesArguments,
    ListWatchesArguments,
    SearchArguments,
    ToolArguments,
    WatchDetailsArguments,
)
from .protocol import ProtocolError, METHOD_NOT_FOUND


@dataclass(frozen=True)
class UpstreamRequest:
    path: str
    params: Dict[str, Any] = field(default_factory=dict)


def upstream_param_name(argument_name: str) -> str:
    """snake_case argument name → hyphenated upstream parameter name."""
    return argument_name.replace("_", "-")


def query_value(value: Any) -> Any:
    """Integral floats go out as integers (1.0 → 1), like a JS number would."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _present_params(arguments: ToolArguments, *names: str) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for name in names:
        value = getattr(arguments, name)
        if value is not None:
            params[upstream_param_name(name)] = query_value(value)
    return params


def _search(args: SearchArguments) -> UpstreamRequest:
    return UpstreamRequest("search", {"q": args.q})


def _search_refnr(args: SearchArguments) -> UpstreamRequest:
    return UpstreamRequest("search/refnr", {"q": args.q})


def _list_brands(args: ListBrandsArguments) -> UpstreamRequest:
    return UpstreamRequest("brands")


def _list_families(args: ListFamiliesArguments) -> UpstreamRequest:
    return UpstreamRequest("families", _present_params(args, "brand_id"))


def _list_watches(args: ListWatchesArguments) -> UpstreamRequest:
    return UpstreamRequest(
        "watches",
        _present_params(args, "brand_id", "family_id", "updated_since"),
    )


def _get_watch_details(args: WatchDetailsArguments) -> UpstreamRequest:
    return UpstreamRequest("watch", {"id": query_value(args.id)})


_TRANSLATORS: Dict[str, Callable[[Any], UpstreamRequest]] = {
    "search": _search,
    "search_refnr": _search_refnr,
    "list_brands": _list_brands,
    "list_families": _list_families,
    "list_watches": _list_watches,
    "get_watch_details": _get_watch_details,
}


def translate(name: str, arguments: ToolArguments) -> UpstreamRequest:
    """Build the upstream request for tool `name` from its decoded arguments."""
    translator = _TRANSLATORS.get(name)
    if translator is None:
        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown tool: {name}")
    return translator(arguments)
