"""CodeDeploy request construction.

Builds request envelopes for the CodeDeploy JSON API from snake_case Python
parameters.

Example:
    >>> from codedeploy_ops import codedeploy
    >>> op = codedeploy.list_deployment_groups("my-app", [("next_token", "abc")])
    >>> op.data
    {'applicationName': 'my-app', 'nextToken': 'abc'}
"""

from __future__ import annotations

__version__ = "0.1.0"

from codedeploy_ops.casing import (
    DEFAULT_CASE_RULES,
    CaseRules,
    CasingPolicy,
    KeyTypeError,
    NestingDepthError,
    camelize,
    camelize_map,
    child_policy,
    effective_policy,
    render,
    tokenize,
    transform,
)
from codedeploy_ops.operation import JsonOperation, build_headers, operation_target, request
from codedeploy_ops.options import (
    Tag,
    TagValidationError,
    build_paging,
    keyword_to_map,
    normalize_options,
    normalize_paging,
    normalize_tags,
)

__all__ = [
    "DEFAULT_CASE_RULES",
    "CaseRules",
    "CasingPolicy",
    "JsonOperation",
    "KeyTypeError",
    "NestingDepthError",
    "Tag",
    "TagValidationError",
    "__version__",
    "build_headers",
    "build_paging",
    "camelize",
    "camelize_map",
    "child_policy",
    "effective_policy",
    "keyword_to_map",
    "normalize_options",
    "normalize_paging",
    "normalize_tags",
    "operation_target",
    "render",
    "request",
    "tokenize",
    "transform",
]
