"""
IAM roles component for the webserver instance.

Creates:
- EC2 instance role with SSM and CloudFormation read-only managed policies
- Inline policy allowing retrieval of a secret value whose name is already
  known (no secret listing)
- Instance profile binding the role to the EC2 instance
"""

import json
from dataclasses import dataclass
from typing import Any

import pulumi
import pulumi_aws as aws

from rds_elasticache.configs.constants import WEBSERVER_MANAGED_POLICIES
from rds_elasticache.utils.tags import create_tags

SECRET_READ_ACTIONS = ["secretsmanager:GetSecretValue"]


def secret_read_policy_document() -> dict[str, Any]:
    """
    Build the inline policy for reading secret values.

    Only GetSecretValue is granted, so the instance can read a secret it
    already knows the name of but cannot enumerate secrets.

    Returns:
        IAM policy document
    """
    return {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": list(SECRET_READ_ACTIONS),
                "Resource": ["arn:aws:secretsmanager:*:*:secret:*"],
            },
        ],
    }


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    webserver_role_arn: pulumi.Output[str]
    webserver_instance_profile_name: pulumi.Output[str]


class IamRolesComponent(pulumi.ComponentResource):
    """IAM role and instance profile assumed by the webserver EC2."""

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("rds-elasticache:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # EC2 assume role policy
        ec2_assume_policy = json.dumps({
            "Version": "2012-10-17",
            "Statement": [{
                "Effect": "Allow",
                "Principal": {"Service": "ec2.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }],
        })

        self.webserver_role = aws.iam.Role(
            f"{name}-webserver-role",
            assume_role_policy=ec2_assume_policy,
            tags=create_tags(environment, f"{name}-webserver-role"),
            opts=child_opts,
        )

        # AWS managed policies (Session Manager access, stack output lookups)
        self.managed_policy_attachments = [
            aws.iam.RolePolicyAttachment(
                f"{name}-webserver-{suffix}",
                role=self.webserver_role.name,
                policy_arn=policy_arn,
                opts=child_opts,
            )
            for suffix, policy_arn in WEBSERVER_MANAGED_POLICIES.items()
        ]

        self.secret_read_policy = aws.iam.RolePolicy(
            f"{name}-secret-read-only",
            role=self.webserver_role.id,
            policy=json.dumps(secret_read_policy_document()),
            opts=child_opts,
        )

        self.webserver_instance_profile = aws.iam.InstanceProfile(
            f"{name}-webserver-profile",
            role=self.webserver_role.name,
            tags=create_tags(environment, f"{name}-webserver-profile"),
            opts=child_opts,
        )

        self.register_outputs({
            "webserver_role_arn": self.webserver_role.arn,
            "webserver_instance_profile_name": self.webserver_instance_profile.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            webserver_role_arn=self.webserver_role.arn,
            webserver_instance_profile_name=self.webserver_instance_profile.name,
        )
