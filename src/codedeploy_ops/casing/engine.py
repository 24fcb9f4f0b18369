"""Rewrite parameter trees into the service's wire-format keys.

The service expects camelCase JSON field names, with a handful of PascalCase
exceptions described by `CaseRules`. `camelize_map` walks mappings and
sequences, renders every mapping key and leaves all other values untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from codedeploy_ops.casing.rules import (
    DEFAULT_CASE_RULES,
    CasingPolicy,
    CaseRules,
    child_policy,
    effective_policy,
)
from codedeploy_ops.casing.tokenize import key_text, tokenize

DEFAULT_MAX_DEPTH = 64


class KeyTypeError(TypeError):
    """Raised when a mapping key is neither a string nor a string-valued Enum."""

    def __init__(self, key: object) -> None:
        super().__init__(
            f"Parameter keys must be strings, got {type(key).__name__}: {key!r}"
        )
        self.key = key


class NestingDepthError(ValueError):
    """Raised when a parameter tree nests deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Parameter tree nests deeper than {max_depth} levels")
        self.max_depth = max_depth


def render(key: str, policy: CasingPolicy) -> str:
    """Join the words of `key` into camelCase or PascalCase.

    Every word after the first is capitalized (first letter upper, the rest
    lower), so all-caps words are not preserved.

    Example:
        >>> render("a_more_complex_atom123", CasingPolicy.LOWER_INITIAL)
        'aMoreComplexAtom123'
        >>> render("ec2_tag_filters", CasingPolicy.UPPER_INITIAL)
        'Ec2TagFilters'
    """
    words = tokenize(key)
    if not words:
        return ""
    first, rest = words[0], words[1:]
    head = first.lower() if policy is CasingPolicy.LOWER_INITIAL else first.capitalize()
    return head + "".join(word.capitalize() for word in rest)


def camelize(key: object, rules: CaseRules = DEFAULT_CASE_RULES) -> str:
    """Render a single raw key using the policy the rules assign to it.

    Example:
        >>> camelize("test_val")
        'testVal'
        >>> camelize("abc-def-a123")
        'abcDefA123'
        >>> camelize("A_test_of_initial_cap")
        'aTestOfInitialCap'
    """
    text = key_text(key)
    if text is None:
        raise KeyTypeError(key)
    return render(text, rules.policy_for(text))


def camelize_map(
    value: Any,
    rules: CaseRules = DEFAULT_CASE_RULES,
    *,
    policy: CasingPolicy | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Any:
    """Camelize every mapping key in a parameter tree.

    Args:
        value: A mapping, sequence or scalar. Mappings may nest arbitrarily.
        rules: Casing rules; defaults to the built-in CodeDeploy table.
        policy: Overrides the rules' default policy for the whole call,
            e.g. `CasingPolicy.UPPER_INITIAL` for PascalCase payloads.
        max_depth: Maximum nesting of mappings and sequences.

    Returns:
        A structurally identical tree whose mapping keys are wire-format
        strings. Lists and tuples become lists; scalars pass through.

    Raises:
        KeyTypeError: A mapping key is not a string.
        NestingDepthError: The tree nests deeper than `max_depth`.
        ValueError: Two keys at one level render to the same wire key.

    Example:
        >>> camelize_map({"abc_def": 123, "another_val": {"embed_value": "val2"}})
        {'abcDef': 123, 'anotherVal': {'embedValue': 'val2'}}
    """
    start = rules.default if policy is None else policy
    return _transform(value, start, rules, 0, max_depth)


def _transform(
    value: Any, policy: CasingPolicy, rules: CaseRules, depth: int, max_depth: int
) -> Any:
    if isinstance(value, Mapping):
        if depth >= max_depth:
            raise NestingDepthError(max_depth)
        converted: dict[str, Any] = {}
        for raw_key, item in value.items():
            text = key_text(raw_key)
            if text is None:
                raise KeyTypeError(raw_key)
            wire_key = render(text, effective_policy(text, policy, rules))
            if wire_key in converted:
                msg = (
                    f"Key collision during camelCase conversion: {raw_key!r} -> "
                    f"{wire_key!r} conflicts with an existing key"
                )
                raise ValueError(msg)
            converted[wire_key] = _transform(
                item,
                child_policy(text, policy, rules),
                rules.descend(text),
                depth + 1,
                max_depth,
            )
        return converted
    if isinstance(value, (list, tuple)):
        if depth >= max_depth:
            raise NestingDepthError(max_depth)
        return [_transform(item, policy, rules, depth + 1, max_depth) for item in value]
    return value


def transform(value: Any, policy: CasingPolicy, rules: CaseRules = DEFAULT_CASE_RULES) -> Any:
    """Camelize `value` starting from an explicit top-level policy."""
    return camelize_map(value, rules, policy=policy)
