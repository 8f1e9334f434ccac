"""
AWS Deployer Strategy implementation.

Deploys to an EKS cluster. Credentials are injected by the execution
context as AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY / AWS_DEFAULT_REGION,
which both the aws CLI and the generated kubeconfig read.
"""

from typing import List

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.providers.base import BaseDeployerStrategy, Command


class AWSDeployerStrategy(BaseDeployerStrategy):
    """
    AWS implementation of the DeploymentStrategy protocol.

    Example Usage:
        strategy = AWSDeployerStrategy(config, context)
        strategy.deploy()
    """

    name = CONSTANTS.PROVIDER_AWS

    def cluster_commands(self) -> List[Command]:
        command = ["aws", "eks", "update-kubeconfig", "--name", self.cluster_name]
        region = self.credentials.get("aws_region")
        if region:
            command += ["--region", region]
        return [command]
