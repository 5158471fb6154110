"""JSON decoding for file contents.

Decoding goes through pydantic so callers get either a validated model or a
``JsonValue`` tree, never an untyped ``dict`` produced by a silent fallback.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Type, TypeVar, Union, overload

from pydantic import JsonValue, TypeAdapter, ValidationError

from boundedfs.security.errors import MalformedJsonError

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


@overload
def load_json(text: Union[str, bytes], model: None = None, *, source: Optional[str] = None) -> JsonValue: ...


@overload
def load_json(text: Union[str, bytes], model: Type[T], *, source: Optional[str] = None) -> T: ...


def load_json(text: Union[str, bytes], model: Any = None, *, source: Optional[str] = None) -> Any:
    """Parse ``text`` as JSON, optionally validating into ``model``.

    Args:
        text: Raw JSON document
        model: A pydantic model class or any type accepted by ``TypeAdapter``.
            When omitted the document is returned as a ``JsonValue``.
        source: Path reported in the error message

    Raises:
        MalformedJsonError: If the document cannot be parsed or validated
    """
    target = JsonValue if model is None else model
    try:
        return _adapter(target).validate_json(text)
    except ValidationError as exc:
        where = f" from: {source}" if source else ""
        raise MalformedJsonError(f"could not parse JSON{where}: {exc.error_count()} error(s)", path=source) from exc


__all__ = ["load_json"]
