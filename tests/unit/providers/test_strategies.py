"""
Unit tests for the built-in provider strategies.

Verifies the provider CLI commands and credential injection without
calling any cloud.
"""

import pytest

from cloud_deployer.core.context import ExecutionContext
from cloud_deployer.core.exceptions import ProviderError
from cloud_deployer.core.protocols import DeploymentStrategy
from cloud_deployer.core.registry import ProviderRegistry
from cloud_deployer.providers import BUILTIN_STRATEGIES
from cloud_deployer.providers.aws import AWSDeployerStrategy
from cloud_deployer.providers.azure import AzureDeployerStrategy
from cloud_deployer.providers.gcp import GCPDeployerStrategy


class TestRegistration:

    def test_builtin_strategies_are_registered_under_their_keys(self):
        for key, strategy in BUILTIN_STRATEGIES.items():
            assert ProviderRegistry.get(key) is strategy
            assert strategy.name == key

    @pytest.mark.parametrize("strategy_class", [AWSDeployerStrategy, AzureDeployerStrategy, GCPDeployerStrategy])
    def test_strategies_satisfy_protocol(self, strategy_class, make_config, context):
        assert isinstance(strategy_class(make_config(), context), DeploymentStrategy)


class TestAWSDeployerStrategy:

    def test_commands_update_kubeconfig_then_roll_out(self, make_config, context):
        strategy = AWSDeployerStrategy(make_config(app_label="shop"), context)

        assert strategy.commands() == [
            ["aws", "eks", "update-kubeconfig", "--name", "ci-agent", "--region", "eu-central-1"],
            ["kubectl", "rollout", "restart", "deployment/shop"],
            ["kubectl", "rollout", "status", "deployment/shop", "--timeout=300s"],
        ]

    def test_cluster_name_from_credentials(self, make_config, executor):
        context = ExecutionContext(executor=executor, credentials={"aws": {"cluster_name": "prod-eks"}})

        strategy = AWSDeployerStrategy(make_config(), context)

        assert strategy.cluster_commands() == [["aws", "eks", "update-kubeconfig", "--name", "prod-eks"]]

    def test_deploy_runs_every_command_with_credentials(self, make_config, context, executor):
        AWSDeployerStrategy(make_config(), context).deploy()

        assert [call[1][0] for call in executor.calls] == ["aws", "kubectl", "kubectl"]
        for provider, _, env in executor.calls:
            assert provider == "aws"
            assert env["AWS_SECRET_ACCESS_KEY"] == "secret"

    def test_default_app_label_is_used(self, make_config, context):
        strategy = AWSDeployerStrategy(make_config(), context)

        assert ["kubectl", "rollout", "restart", "deployment/default-app"] in strategy.commands()


class TestAzureDeployerStrategy:

    def test_resource_group_defaults_to_label(self, make_config, executor):
        context = ExecutionContext(executor=executor)

        strategy = AzureDeployerStrategy(make_config(cloud_provider="azure"), context)

        assert strategy.cluster_commands() == [[
            "az", "aks", "get-credentials",
            "--resource-group", "ci-agent-rg",
            "--name", "ci-agent",
            "--overwrite-existing",
        ]]

    def test_credentials_are_injected(self, make_config, executor):
        context = ExecutionContext(executor=executor, credentials={"azure": {
            "azure_client_id": "cid",
            "azure_client_secret": "csecret",
            "azure_tenant_id": "tid",
            "azure_resource_group": "shop-rg",
        }})

        AzureDeployerStrategy(make_config(cloud_provider="azure"), context).deploy()

        provider, command, env = executor.calls[0]
        assert provider == "azure"
        assert "shop-rg" in command
        assert env == {"AZURE_CLIENT_ID": "cid", "AZURE_CLIENT_SECRET": "csecret", "AZURE_TENANT_ID": "tid"}


class TestGCPDeployerStrategy:

    def test_default_region(self, make_config, executor):
        strategy = GCPDeployerStrategy(make_config(cloud_provider="gcp"), ExecutionContext(executor=executor))

        assert strategy.cluster_commands() == [[
            "gcloud", "container", "clusters", "get-credentials", "ci-agent", "--region", "europe-west1",
        ]]

    def test_project_and_region_from_credentials(self, make_config, executor):
        context = ExecutionContext(executor=executor, credentials={"gcp": {
            "gcp_project_id": "shop-prod",
            "gcp_region": "us-central1",
        }})

        strategy = GCPDeployerStrategy(make_config(cloud_provider="gcp"), context)

        assert strategy.cluster_commands() == [[
            "gcloud", "container", "clusters", "get-credentials", "ci-agent",
            "--region", "us-central1", "--project", "shop-prod",
        ]]


class TestDeployFailure:

    def test_first_failing_command_stops_deployment(self, make_config, failing_executor):
        context = ExecutionContext(executor=failing_executor)

        with pytest.raises(ProviderError):
            GCPDeployerStrategy(make_config(cloud_provider="gcp"), context).deploy()

        assert len(failing_executor.calls) == 1

    def test_strategy_does_not_mutate_context(self, make_config, context):
        before = context.credentials_for("aws")

        AWSDeployerStrategy(make_config(), context).deploy()

        assert context.credentials_for("aws") == before
