"""Tests for the request envelope."""
from __future__ import annotations

import dataclasses

import pytest


class TestOperationTarget:
    """Tests for the routing header."""

    def test_target_value(self) -> None:
        from codedeploy_ops.cli.config import CodeDeployOpsConfig
        from codedeploy_ops.operation import operation_target

        config = CodeDeployOpsConfig()

        assert operation_target("list_applications", config) == "CodeDeploy_20141006.ListApplications"
        assert (
            operation_target("delete_git_hub_account_token", config)
            == "CodeDeploy_20141006.DeleteGitHubAccountToken"
        )

    def test_target_uses_config(self) -> None:
        from codedeploy_ops.cli.config import CodeDeployOpsConfig
        from codedeploy_ops.operation import operation_target

        config = CodeDeployOpsConfig(namespace="Custom", api_version="20200101")

        assert operation_target("get_deployment", config) == "Custom_20200101.GetDeployment"


class TestBuildHeaders:
    """Tests for header construction."""

    def test_headers_in_order(self) -> None:
        from codedeploy_ops.cli.config import CodeDeployOpsConfig
        from codedeploy_ops.operation import build_headers

        headers = build_headers("list_deployments", CodeDeployOpsConfig())

        assert headers == (
            ("x-amz-target", "CodeDeploy_20141006.ListDeployments"),
            ("content-type", "application/x-amz-json-1.1"),
        )


class TestRequest:
    """Tests for building a JsonOperation."""

    def test_envelope_fields(self) -> None:
        from codedeploy_ops.cli.config import CodeDeployOpsConfig
        from codedeploy_ops.operation import request

        op = request({"applicationName": "app"}, "get_application", config=CodeDeployOpsConfig())

        assert op.action == "GetApplication"
        assert op.http_method == "POST"
        assert op.path == "/"
        assert op.service == "codedeploy"
        assert op.data == {"applicationName": "app"}
        assert op.header("X-Amz-Target") == "CodeDeploy_20141006.GetApplication"
        assert op.header("missing") is None

    def test_envelope_is_frozen(self) -> None:
        from codedeploy_ops.cli.config import CodeDeployOpsConfig
        from codedeploy_ops.operation import request

        op = request({}, "list_applications", config=CodeDeployOpsConfig())

        with pytest.raises(dataclasses.FrozenInstanceError):
            op.path = "/other"  # type: ignore[misc]
