"""
Argument decoding: one typed model per tool argument shape.

An argument bag from tools/call is decoded into exactly one of the
models below or rejected with INVALID_PARAMS. Nothing downstream ever
sees the raw bag.
"""

from typing import Annotated, Any, Dict, Optional, Type, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
    field_validator,
)

from .logger import get_logger
from .protocol import ProtocolError, INVALID_PARAMS, METHOD_NOT_FOUND

log = get_logger("arguments")

# Booleans are rejected: strict int/float never coerce them.
IdValue = Union[StrictStr, StrictInt, StrictFloat]

# Lexical YYYY-MM-DD only; the API is the real date validator.
DateString = Annotated[
    str,
    StringConstraints(strict=True, pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"),
]


class ToolArgumentsBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class SearchArguments(ToolArgumentsBase):
    """Arguments for search and search_refnr."""
    q: StrictStr


class ListBrandsArguments(ToolArgumentsBase):
    pass


class ListFamiliesArguments(ToolArgumentsBase):
    brand_id: IdValue


class ListWatchesArguments(ToolArgumentsBase):
    brand_id: IdValue
    family_id: Optional[IdValue] = None
    updated_since: Optional[DateString] = None

    @field_validator("family_id", "updated_since", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Only runs for values that were actually supplied
        if value is None:
            raise ValueError("omit the field instead of passing null")
        return value


class WatchDetailsArguments(ToolArgumentsBase):
    id: IdValue


ToolArguments = Union[
    SearchArguments,
    ListBrandsArguments,
    ListFamiliesArguments,
    ListWatchesArguments,
    WatchDetailsArguments,
]

ARGUMENT_MODELS: Dict[str, Type[ToolArgumentsBase]] = {
    "search": SearchArguments,
    "search_refnr": SearchArguments,
    "list_brands": ListBrandsArguments,
    "list_families": ListFamiliesArguments,
    "list_watches": ListWatchesArguments,
    "get_watch_details": WatchDetailsArguments,
}


def validate_arguments(name: str, arguments: Any) -> ToolArguments:
    """
    Decode the raw argument bag for tool `name`.

    Returns the typed arguments model. Raises ProtocolError with
    INVALID_PARAMS when the bag does not fit, or METHOD_NOT_FOUND when
    no model exists for `name`.
    """
    model = ARGUMENT_MODELS.get(name)
    if model is None:
        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown tool: {name}")

    # list_brands takes no arguments; whatever was sent is not inspected
    if model is ListBrandsArguments:
        return ListBrandsArguments()

    try:
        return model.model_validate(arguments)
    except ValidationError as exc:
        log.warning(
            f"Invalid arguments for {name}: "
            f"{exc.error_count()} error(s): {exc.errors(include_url=False)}"
        )
        raise ProtocolError(INVALID_PARAMS, f"Invalid arguments for {name}") from exc
