"""Operations on AWS CodeDeploy.

Each function validates its required arguments, merges them with optional
details supplied by the caller, converts the keys to the wire format and
returns a `JsonOperation`. Optional details may be passed as a dict, a list
of `(key, value)` pairs or a single pair, using snake_case keys.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from codedeploy_ops.casing.engine import camelize_map
from codedeploy_ops.casing.rules import CasingPolicy
from codedeploy_ops.cli.config import CodeDeployOpsConfig, get_config
from codedeploy_ops.operation import JsonOperation, request
from codedeploy_ops.options import Options, normalize_options, normalize_paging, normalize_tags


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"{name} must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    if not value:
        msg = f"{name} cannot be empty"
        raise ValueError(msg)
    return value


def _require_list(name: str, value: object) -> list[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        msg = f"{name} must be a list, got {type(value).__name__}"
        raise TypeError(msg)
    return list(value)


def _build(
    action: str,
    params: dict[str, Any],
    opts: Options = None,
    *,
    policy: CasingPolicy | None = None,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    config = config or get_config()
    merged = {**normalize_options(opts), **params}
    data = camelize_map(merged, policy=policy, max_depth=config.max_depth)
    return request(data, action, config=config)


def _paged(
    action: str,
    params: dict[str, Any],
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    return _build(action, {**params, **normalize_paging(opts)}, config=config)


def _tags(tags: object, config: CodeDeployOpsConfig | None) -> list[dict[str, str]]:
    config = config or get_config()
    return normalize_tags(tags, strict=config.strict_tags)


def batch_get_applications(
    application_names: Sequence[str], *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about one or more applications.

    Example:
        >>> batch_get_applications(["TestDeploy1", "TestDeploy2"]).data
        {'applicationNames': ['TestDeploy1', 'TestDeploy2']}
    """
    names = _require_list("application_names", application_names)
    return _build("batch_get_applications", {"application_names": names}, config=config)


def create_application(
    application_name: str,
    compute_platform: str = "Server",
    tags: object = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Creates an application.

    `compute_platform` is one of "Server", "Lambda" or "ECS".

    Example:
        >>> create_application("TestDeploy").data
        {'applicationName': 'TestDeploy', 'computePlatform': 'Server'}
    """
    params: dict[str, Any] = {
        "application_name": _require_str("application_name", application_name),
        "compute_platform": _require_str("compute_platform", compute_platform),
    }
    if tags is not None:
        params["tags"] = _tags(tags, config)
    return _build("create_application", params, config=config)


def delete_application(
    application_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Deletes an application."""
    name = _require_str("application_name", application_name)
    return _build("delete_application", {"application_name": name}, config=config)


def get_application(
    application_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about an application."""
    name = _require_str("application_name", application_name)
    return _build("get_application", {"application_name": name}, config=config)


def list_applications(
    opts: Options = None, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Lists the applications registered with the IAM user or AWS account.

    Only `next_token` is read from `opts`.
    """
    return _paged("list_applications", {}, opts, config=config)


def update_application(
    application_name: str,
    new_application_name: str,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Changes the name of an application."""
    params = {
        "application_name": _require_str("application_name", application_name),
        "new_application_name": _require_str("new_application_name", new_application_name),
    }
    return _build("update_application", params, config=config)


def batch_get_application_revisions(
    application_name: str,
    revisions: Sequence[dict[str, Any]],
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Gets information about one or more application revisions."""
    params = {
        "application_name": _require_str("application_name", application_name),
        "revisions": _require_list("revisions", revisions),
    }
    return _build("batch_get_application_revisions", params, config=config)


def get_application_revision(
    application_name: str,
    revision: dict[str, Any],
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Gets information about an application revision.

    `revision` may be given either as the revision location itself or wrapped
    in a `revision` key.
    """
    details = normalize_options(revision)
    if "revision" not in details:
        details = {"revision": details}
    name = _require_str("application_name", application_name)
    return _build("get_application_revision", {"application_name": name}, details, config=config)


def list_application_revisions(
    application_name: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Lists information about revisions for an application.

    Supported options: sort_by, sort_order, s3_bucket, s3_key_prefix,
    deployed, next_token.
    """
    name = _require_str("application_name", application_name)
    return _build("list_application_revisions", {"application_name": name}, opts, config=config)


def register_application_revision(
    application_name: str,
    revision: dict[str, Any],
    description: str | None = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Registers a revision for the specified application."""
    params: dict[str, Any] = {
        "application_name": _require_str("application_name", application_name),
        "revision": normalize_options(revision),
    }
    if description is not None:
        params["description"] = description
    return _build("register_application_revision", params, config=config)


def batch_get_deployments(
    deployment_ids: Sequence[str], *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about one or more deployments."""
    ids = _require_list("deployment_ids", deployment_ids)
    return _build("batch_get_deployments", {"deployment_ids": ids}, config=config)


def batch_get_deployment_instances(
    deployment_id: str,
    instance_ids: Sequence[str],
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Gets information about one or more instances that are part of a deployment.

    Example:
        >>> batch_get_deployment_instances("TestDeploy", ["i-23324"]).data
        {'deploymentId': 'TestDeploy', 'instanceIds': ['i-23324']}
    """
    params = {
        "deployment_id": _require_str("deployment_id", deployment_id),
        "instance_ids": _require_list("instance_ids", instance_ids),
    }
    return _build("batch_get_deployment_instances", params, config=config)


def continue_deployment(
    deployment_id: str,
    deployment_wait_type: str | None = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """For a blue/green deployment, starts the process of rerouting traffic."""
    params: dict[str, Any] = {"deployment_id": _require_str("deployment_id", deployment_id)}
    if deployment_wait_type is not None:
        params["deployment_wait_type"] = deployment_wait_type
    return _build("continue_deployment", params, config=config)


def create_deployment(
    application_name: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Deploys an application revision through the specified deployment group.

    `opts` carries the deployment details (deployment_group_name, revision,
    deployment_config_name, description, auto_rollback_configuration, ...).
    """
    name = _require_str("application_name", application_name)
    return _build("create_deployment", {"application_name": name}, opts, config=config)


def get_deployment(
    deployment_id: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about a deployment.

    Example:
        >>> get_deployment("deploy_id").data
        {'deploymentId': 'deploy_id'}
    """
    deployment_id = _require_str("deployment_id", deployment_id)
    return _build("get_deployment", {"deployment_id": deployment_id}, config=config)


def get_deployment_instance(
    deployment_id: str,
    instance_id: str,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Gets information about an instance as part of a deployment."""
    params = {
        "deployment_id": _require_str("deployment_id", deployment_id),
        "instance_id": _require_str("instance_id", instance_id),
    }
    return _build("get_deployment_instance", params, config=config)


def list_deployment_instances(
    deployment_id: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Lists the instances for a deployment.

    Supported options: instance_status_filter, instance_type_filter,
    next_token.
    """
    deployment_id = _require_str("deployment_id", deployment_id)
    return _build(
        "list_deployment_instances", {"deployment_id": deployment_id}, opts, config=config
    )


def list_deployments(
    opts: Options = None, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Lists the deployments in a deployment group for an application.

    Supported options: application_name, deployment_group_name, external_id,
    include_only_statuses, create_time_range, next_token. Times in
    create_time_range are epoch seconds; leave either end as None for an
    open-ended range.
    """
    return _build("list_deployments", {}, opts, config=config)


def put_lifecycle_event_hook_execution_status(
    deployment_id: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Sets the result of a Lambda validation function.

    Supported options: lifecycle_event_hook_execution_id, status.
    """
    deployment_id = _require_str("deployment_id", deployment_id)
    return _build(
        "put_lifecycle_event_hook_execution_status",
        {"deployment_id": deployment_id},
        opts,
        config=config,
    )


def stop_deployment(
    deployment_id: str,
    auto_rollback_enabled: bool | None = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Attempts to stop an ongoing deployment."""
    params: dict[str, Any] = {"deployment_id": _require_str("deployment_id", deployment_id)}
    if isinstance(auto_rollback_enabled, bool):
        params["auto_rollback_enabled"] = auto_rollback_enabled
    return _build("stop_deployment", params, config=config)


def create_deployment_config(
    deployment_config_name: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Creates a deployment configuration.

    Supported options: minimum_healthy_hosts, traffic_routing_config,
    compute_platform, zonal_config.
    """
    name = _require_str("deployment_config_name", deployment_config_name)
    return _build(
        "create_deployment_config", {"deployment_config_name": name}, opts, config=config
    )


def delete_deployment_config(
    deployment_config_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Deletes a deployment configuration.

    Configurations in use and predefined configurations cannot be deleted.
    """
    name = _require_str("deployment_config_name", deployment_config_name)
    return _build("delete_deployment_config", {"deployment_config_name": name}, config=config)


def get_deployment_config(
    deployment_config_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about a deployment configuration."""
    name = _require_str("deployment_config_name", deployment_config_name)
    return _build("get_deployment_config", {"deployment_config_name": name}, config=config)


def list_deployment_configs(
    opts: Options = None, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Lists the deployment configurations."""
    return _paged("list_deployment_configs", {}, opts, config=config)


def batch_get_deployment_groups(
    application_name: str,
    deployment_group_names: Sequence[str],
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Gets information about one or more deployment groups."""
    params = {
        "application_name": _require_str("application_name", application_name),
        "deployment_group_names": _require_list("deployment_group_names", deployment_group_names),
    }
    return _build("batch_get_deployment_groups", params, config=config)


def create_deployment_group(
    application_name: str,
    deployment_group_name: str,
    service_role_arn: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Creates a deployment group to which application revisions are deployed.

    Tag filters (ec2_tag_filters, on_premises_instance_tag_filters,
    ec2_tag_set, on_premises_tag_set) use `key`, `value` and `type` fields,
    which are sent capitalized.
    """
    details = normalize_options(opts)
    if "tags" in details:
        details["tags"] = _tags(details["tags"], config)
    params = {
        "application_name": _require_str("application_name", application_name),
        "deployment_group_name": _require_str("deployment_group_name", deployment_group_name),
        "service_role_arn": _require_str("service_role_arn", service_role_arn),
    }
    return _build("create_deployment_group", params, details, config=config)


def delete_deployment_group(
    application_name: str,
    deployment_group_name: str,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Deletes a deployment group.

    Example:
        >>> delete_deployment_group("TestApp", "TestDeploy").data
        {'applicationName': 'TestApp', 'deploymentGroupName': 'TestDeploy'}
    """
    params = {
        "application_name": _require_str("application_name", application_name),
        "deployment_group_name": _require_str("deployment_group_name", deployment_group_name),
    }
    return _build("delete_deployment_group", params, config=config)


def get_deployment_group(
    application_name: str,
    deployment_group_name: str,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Gets information about a deployment group."""
    params = {
        "application_name": _require_str("application_name", application_name),
        "deployment_group_name": _require_str("deployment_group_name", deployment_group_name),
    }
    return _build("get_deployment_group", params, config=config)


def list_deployment_groups(
    application_name: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Lists the deployment groups for an application.

    Example:
        >>> list_deployment_groups("application").data
        {'applicationName': 'application'}
    """
    name = _require_str("application_name", application_name)
    return _paged("list_deployment_groups", {"application_name": name}, opts, config=config)


def update_deployment_group(
    application_name: str,
    current_deployment_group_name: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Changes information about a deployment group.

    Supported options mirror `create_deployment_group`, plus
    new_deployment_group_name.
    """
    params = {
        "application_name": _require_str("application_name", application_name),
        "current_deployment_group_name": _require_str(
            "current_deployment_group_name", current_deployment_group_name
        ),
    }
    return _build("update_deployment_group", params, opts, config=config)


def delete_git_hub_account_token(
    token_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Deletes a GitHub account connection."""
    name = _require_str("token_name", token_name)
    return _build("delete_git_hub_account_token", {"token_name": name}, config=config)


def list_git_hub_account_token_names(
    opts: Options = None, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Lists the names of stored connections to GitHub accounts."""
    return _paged("list_git_hub_account_token_names", {}, opts, config=config)


def add_tags_to_on_premises_instances(
    instance_names: Sequence[str],
    tags: object,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Adds tags to on-premises instances.

    Example:
        >>> add_tags_to_on_premises_instances(["host-1"], [("env", "prod")]).data
        {'instanceNames': ['host-1'], 'tags': [{'Key': 'env', 'Value': 'prod'}]}
    """
    params = {
        "instance_names": _require_list("instance_names", instance_names),
        "tags": _tags(tags, config),
    }
    return _build("add_tags_to_on_premises_instances", params, config=config)


def batch_get_on_premises_instances(
    instance_names: Sequence[str], *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about one or more on-premises instances."""
    names = _require_list("instance_names", instance_names)
    return _build("batch_get_on_premises_instances", {"instance_names": names}, config=config)


def deregister_on_premises_instance(
    instance_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Deregisters an on-premises instance."""
    name = _require_str("instance_name", instance_name)
    return _build("deregister_on_premises_instance", {"instance_name": name}, config=config)


def get_on_premises_instance(
    instance_name: str, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets information about an on-premises instance."""
    name = _require_str("instance_name", instance_name)
    return _build("get_on_premises_instance", {"instance_name": name}, config=config)


def list_on_premises_instances(
    opts: Options = None, *, config: CodeDeployOpsConfig | None = None
) -> JsonOperation:
    """Gets a list of names for one or more on-premises instances.

    Supported options: registration_status, tag_filters, next_token.
    """
    return _build("list_on_premises_instances", {}, opts, config=config)


def register_on_premises_instance(
    instance_name: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Registers an on-premises instance.

    Pass either iam_session_arn or iam_user_arn in `opts`, not both.
    """
    details = normalize_options(opts)
    if details.get("iam_session_arn") and details.get("iam_user_arn"):
        msg = "use either iam_session_arn or iam_user_arn, not both"
        raise ValueError(msg)
    name = _require_str("instance_name", instance_name)
    return _build("register_on_premises_instance", {"instance_name": name}, details, config=config)


def remove_tags_from_on_premises_instances(
    instance_names: Sequence[str],
    tags: object,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Removes one or more tags from one or more on-premises instances."""
    params = {
        "instance_names": _require_list("instance_names", instance_names),
        "tags": _tags(tags, config),
    }
    return _build("remove_tags_from_on_premises_instances", params, config=config)


def list_tags_for_resource(
    resource_arn: str,
    opts: Options = None,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Returns the tags associated with a CodeDeploy resource.

    This operation, `tag_resource` and `untag_resource` use PascalCase field
    names for the whole body.

    Example:
        >>> list_tags_for_resource("arn:aws:codedeploy:app", [("next_token", "t")]).data
        {'ResourceArn': 'arn:aws:codedeploy:app', 'NextToken': 't'}
    """
    params = {"resource_arn": _require_str("resource_arn", resource_arn), **normalize_paging(opts)}
    return _build(
        "list_tags_for_resource", params, policy=CasingPolicy.UPPER_INITIAL, config=config
    )


def tag_resource(
    resource_arn: str,
    tags: object,
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Associates tags with a CodeDeploy resource."""
    params = {
        "resource_arn": _require_str("resource_arn", resource_arn),
        "tags": _tags(tags, config),
    }
    return _build("tag_resource", params, policy=CasingPolicy.UPPER_INITIAL, config=config)


def untag_resource(
    resource_arn: str,
    tag_keys: Sequence[str],
    *,
    config: CodeDeployOpsConfig | None = None,
) -> JsonOperation:
    """Disassociates tags from a CodeDeploy resource."""
    params = {
        "resource_arn": _require_str("resource_arn", resource_arn),
        "tag_keys": _require_list("tag_keys", tag_keys),
    }
    return _build("untag_resource", params, policy=CasingPolicy.UPPER_INITIAL, config=config)
