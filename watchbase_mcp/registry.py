"""
Tool Registry — the fixed catalog served to tools/list

Tools (in discovery order):
  search, search_refnr, list_brands, list_families,
  list_watches, get_watch_details
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

_ID_SCHEMA = [{"type": "string"}, {"type": "number"}]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        # Copy so callers can't mutate the registry through the schema
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


# ── Tool definitions ─────────────────────────────────────────────────────────

TOOLS: Tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="search",
        description=(
            "Search the database by brand name, family name, watch name "
            "and reference number (whole words)."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "q": {"type": "string", "description": "Search keywords"},
            },
            "required": ["q"],
        },
    ),
    ToolDefinition(
        name="search_refnr",
        description="Search the database by reference number (allows partial matches).",
        input_schema={
            "type": "object",
            "properties": {
                "q": {
                    "type": "string",
                    "description": "Search keywords (reference number)",
                },
            },
            "required": ["q"],
        },
    ),
    ToolDefinition(
        name="list_brands",
        description="Retrieve a list of all brands in the database.",
        input_schema={"type": "object", "properties": {}},
    ),
    ToolDefinition(
        name="list_families",
        description="Retrieve a list of all families for a given brand.",
        input_schema={
            "type": "object",
            "properties": {
                "brand_id": {
                    "oneOf": _ID_SCHEMA,
                    "description": "BrandID of the brand",
                },
            },
            "required": ["brand_id"],
        },
    ),
    ToolDefinition(
        name="list_watches",
        description=(
            "Retrieve a list of watches for a particular Brand and/or Family, "
            "optionally filtered by update date."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "brand_id": {
                    "oneOf": _ID_SCHEMA,
                    "description": "BrandID of the brand",
                },
                "family_id": {
                    "oneOf": _ID_SCHEMA,
                    "description": "Optional: FamilyID of the family",
                },
                "updated_since": {
                    "type": "string",
                    "format": "date",
                    "description": (
                        "Optional: Limit results to watches updated after "
                        "this date (YYYY-MM-DD)"
                    ),
                },
            },
            "required": ["brand_id"],
        },
    ),
    ToolDefinition(
        name="get_watch_details",
        description="Retrieve the full details for a particular watch by its ID.",
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "oneOf": _ID_SCHEMA,
                    "description": "ID of the watch",
                },
            },
            "required": ["id"],
        },
    ),
)


class ToolRegistry:
    """Read-only, ordered lookup over tool definitions."""

    def __init__(self, tools: Iterable[ToolDefinition] = TOOLS):
        ordered = tuple(tools)
        by_name: Dict[str, ToolDefinition] = {}
        for tool in ordered:
            if tool.name in by_name:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            by_name[tool.name] = tool
        self._tools = ordered
        self._by_name = by_name

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [t.name for t in self._tools]

    def to_list(self) -> List[Dict[str, Any]]:
        """Discovery payload, in registry order."""
        return [t.to_dict() for t in self._tools]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)
