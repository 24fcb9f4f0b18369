"""Key-case transformation for request parameters."""

from __future__ import annotations

from codedeploy_ops.casing.engine import (
    DEFAULT_MAX_DEPTH,
    KeyTypeError,
    NestingDepthError,
    camelize,
    camelize_map,
    render,
    transform,
)
from codedeploy_ops.casing.rules import (
    DEFAULT_CASE_RULES,
    CaseRules,
    CasingPolicy,
    child_policy,
    effective_policy,
)
from codedeploy_ops.casing.tokenize import tokenize

__all__ = [
    "DEFAULT_CASE_RULES",
    "DEFAULT_MAX_DEPTH",
    "CaseRules",
    "CasingPolicy",
    "KeyTypeError",
    "NestingDepthError",
    "camelize",
    "camelize_map",
    "child_policy",
    "effective_policy",
    "render",
    "tokenize",
    "transform",
]
