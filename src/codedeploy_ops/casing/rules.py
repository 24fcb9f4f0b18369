"""Casing rules for rendering parameter keys.

Most wire keys are camelCase, but the service capitalizes a few element
fields (`Key`, `Value`, `Type`) inside tag collections and target filters.
`CaseRules` captures those exceptions:

- `default`: the policy inherited at the current level.
- `keys`: per-key policy overrides for keys rendered at the current level.
- `subkeys`: the rules that apply *beneath* a given key. An entry is either a
  single policy (every descendant key inherits it) or a per-field table that
  replaces `keys` for the child level and keeps propagating downward.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum

from codedeploy_ops._internal.frozen import FrozenDict
from codedeploy_ops.casing.tokenize import canonical_key


class CasingPolicy(str, Enum):
    """How the first word of a rendered key is cased."""

    LOWER_INITIAL = "lower"  # camelCase
    UPPER_INITIAL = "upper"  # PascalCase


SubkeyRule = CasingPolicy | FrozenDict[str, CasingPolicy]


def _freeze_policies(table: Mapping[str, object]) -> FrozenDict[str, CasingPolicy]:
    return FrozenDict({canonical_key(k): CasingPolicy(v) for k, v in table.items()})


def _freeze_subkeys(subkeys: Mapping[str, object]) -> FrozenDict[str, SubkeyRule]:
    frozen: dict[str, SubkeyRule] = {}
    for key, rule in subkeys.items():
        if isinstance(rule, Mapping):
            frozen[canonical_key(key)] = _freeze_policies(rule)
        else:
            frozen[canonical_key(key)] = CasingPolicy(rule)
    return FrozenDict(frozen)


@dataclass(frozen=True)
class CaseRules:
    """Immutable rule table consulted while camelizing a parameter tree.

    Table keys are matched on their canonical snake_case form, so an override
    for `tag_filters` also applies to a caller key spelled `tagFilters`.

    Example:
        >>> rules = CaseRules(subkeys={"tags": CasingPolicy.UPPER_INITIAL})
        >>> rules.policy_for("tags")
        <CasingPolicy.LOWER_INITIAL: 'lower'>
    """

    default: CasingPolicy = CasingPolicy.LOWER_INITIAL
    keys: FrozenDict[str, CasingPolicy] = field(default_factory=FrozenDict)
    subkeys: FrozenDict[str, SubkeyRule] = field(default_factory=FrozenDict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default", CasingPolicy(self.default))
        object.__setattr__(self, "keys", _freeze_policies(self.keys))
        object.__setattr__(self, "subkeys", _freeze_subkeys(self.subkeys))

    def policy_for(self, key: str) -> CasingPolicy:
        """Policy used to render `key` itself at this level."""
        return effective_policy(key, self.default, self)

    def descend(self, key: str) -> CaseRules:
        """Rules for the keys nested under `key`."""
        rule = self.subkeys.get(canonical_key(key))
        if rule is None:
            return self
        if isinstance(rule, CasingPolicy):
            return replace(self, default=rule, keys=FrozenDict())
        return replace(self, keys=rule)

    def with_default(self, policy: CasingPolicy) -> CaseRules:
        return replace(self, default=policy)

    def with_keys(self, keys: Mapping[str, CasingPolicy]) -> CaseRules:
        return replace(self, keys=self.keys.merged(_freeze_policies(keys)))

    def with_subkeys(self, subkeys: Mapping[str, object]) -> CaseRules:
        return replace(self, subkeys=self.subkeys.merged(_freeze_subkeys(subkeys)))


def effective_policy(key: str, inherited: CasingPolicy, rules: CaseRules) -> CasingPolicy:
    """Policy for rendering `key`: a `keys` override, else the inherited policy."""
    return rules.keys.get(canonical_key(key), inherited)


def child_policy(key: str, inherited: CasingPolicy, rules: CaseRules) -> CasingPolicy:
    """Policy inherited by the values nested under `key`.

    Only a single-policy `subkeys` entry changes the inherited policy; a
    per-field table changes individual element keys through `keys` instead.
    """
    rule = rules.subkeys.get(canonical_key(key))
    if isinstance(rule, CasingPolicy):
        return rule
    return inherited


_TAG_FIELDS = {
    "key": CasingPolicy.UPPER_INITIAL,
    "type": CasingPolicy.UPPER_INITIAL,
    "value": CasingPolicy.UPPER_INITIAL,
}

DEFAULT_CASE_RULES = CaseRules(
    default=CasingPolicy.LOWER_INITIAL,
    subkeys={
        "ec2_tag_filters": _TAG_FIELDS,
        "tag_filters": _TAG_FIELDS,
        "on_premises_instance_tag_filters": _TAG_FIELDS,
        "ec2_tag_set": _TAG_FIELDS,
        "on_premises_tag_set": _TAG_FIELDS,
        "tags": {
            "key": CasingPolicy.UPPER_INITIAL,
            "value": CasingPolicy.UPPER_INITIAL,
        },
        "target_filters": {
            "target_status": CasingPolicy.UPPER_INITIAL,
            "service_instance_label": CasingPolicy.UPPER_INITIAL,
        },
    },
)
