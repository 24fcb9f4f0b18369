"""Normalization of caller-supplied options.

Callers hand options over in several historical shapes:

- a list of `(key, value)` pairs: `[("next_token", "abc")]`
- one bare pair: `("next_token", "abc")`
- a mapping: `{"next_token": "abc"}`

`classify_options` turns the raw value into one of three explicit variants
and `normalize_options` folds every variant into a plain dict. Any other
shape means "no options supplied" and normalizes to an empty dict.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from codedeploy_ops.casing.engine import camelize_map

logger = structlog.get_logger()


class TagValidationError(ValueError):
    """Raised in strict mode when a tag element has an unusable shape."""

    def __init__(self, element: object, index: int | None = None) -> None:
        where = "" if index is None else f" at index {index}"
        super().__init__(
            f"Invalid tag{where}: {element!r} "
            "(expected a (key, value) pair or a mapping with key/value)"
        )
        self.element = element
        self.index = index


@dataclass(frozen=True)
class OptionPairs:
    """An ordered sequence of `(key, value)` pairs."""

    pairs: tuple[tuple[str, Any], ...]


@dataclass(frozen=True)
class OptionPair:
    """A single bare `(key, value)` pair."""

    key: str
    value: Any


@dataclass(frozen=True)
class OptionMap:
    """Options already given as a mapping."""

    mapping: Mapping[Any, Any]


RawOptions = OptionPairs | OptionPair | OptionMap

# Shapes callers may pass before classification.
Options = Mapping[str, Any] | Sequence[tuple[str, Any]] | tuple[str, Any] | None


def _is_pair(value: object) -> bool:
    return isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], str)


def classify_options(opts: object) -> RawOptions | None:
    """Identify which supported shape `opts` has.

    Returns:
        The matching variant, or None for unsupported or empty input.
    """
    if isinstance(opts, Mapping):
        return OptionMap(opts)
    if _is_pair(opts):
        key, value = opts  # type: ignore[misc]
        return OptionPair(key, value)
    if isinstance(opts, (list, tuple)) and opts and all(_is_pair(item) for item in opts):
        return OptionPairs(tuple(opts))
    return None


def normalize_options(opts: object) -> dict[Any, Any]:
    """Fold any supported options shape into a dict.

    Normalization is shallow: nested values are returned untouched. For
    repeated keys in a pair list the last value wins.

    Example:
        >>> normalize_options([("a", 7), ("b", "abc")])
        {'a': 7, 'b': 'abc'}
        >>> normalize_options(("a", 7))
        {'a': 7}
        >>> normalize_options("unexpected")
        {}
    """
    raw = classify_options(opts)
    if isinstance(raw, OptionMap):
        return dict(raw.mapping)
    if isinstance(raw, OptionPair):
        return {raw.key: raw.value}
    if isinstance(raw, OptionPairs):
        return dict(raw.pairs)
    return {}


def keyword_to_map(value: Any) -> Any:
    """Convert a list of pairs to a dict; return anything else unchanged.

    Example:
        >>> keyword_to_map([("a", 7), ("b", "abc")])
        {'a': 7, 'b': 'abc'}
        >>> keyword_to_map([1, 2, 3])
        [1, 2, 3]
    """
    if isinstance(value, list) and all(_is_pair(item) for item in value):
        return dict(value)
    return value


def normalize_paging(opts: object) -> dict[str, str]:
    """Extract the continuation token from any supported options shape.

    Everything except a string `next_token` is discarded.

    Example:
        >>> normalize_paging([("next_token", "123")])
        {'next_token': '123'}
        >>> normalize_paging([])
        {}
    """
    token = normalize_options(opts).get("next_token")
    if isinstance(token, str):
        return {"next_token": token}
    if token is not None:
        logger.debug("paging_token_ignored", token_type=type(token).__name__)
    return {}


def build_paging(opts: object) -> dict[str, str]:
    """Paging options in wire format: `{"nextToken": ...}` or `{}`."""
    return camelize_map(normalize_paging(opts))


@dataclass(frozen=True)
class Tag:
    """A resource tag."""

    key: str
    value: str

    @classmethod
    def parse(cls, element: object) -> Tag | None:
        """Build a Tag from a pair or a key/value mapping, or None if malformed."""
        if isinstance(element, Mapping):
            key = element.get("key", element.get("Key"))
            value = element.get("value", element.get("Value"))
        elif isinstance(element, tuple) and len(element) == 2:
            key, value = element
        else:
            return None
        if not isinstance(key, str) or not isinstance(value, str):
            return None
        return cls(key=key, value=value)

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}


def normalize_tags(tags: object, *, strict: bool = False) -> list[dict[str, str]]:
    """Convert a list of tags into uniform `{"key": ..., "value": ...}` dicts.

    Malformed elements are skipped unless `strict` is set, in which case the
    first one raises `TagValidationError`.

    Example:
        >>> normalize_tags([("my_key", "value1")])
        [{'key': 'my_key', 'value': 'value1'}]
    """
    if not isinstance(tags, Sequence) or isinstance(tags, (str, bytes)) or _is_pair(tags):
        if strict:
            raise TagValidationError(tags)
        return []

    normalized: list[dict[str, str]] = []
    for index, element in enumerate(tags):
        tag = Tag.parse(element)
        if tag is None:
            if strict:
                raise TagValidationError(element, index)
            logger.debug("tag_dropped", index=index, element=repr(element))
            continue
        normalized.append(tag.to_dict())
    return normalized
