"""
EC2 Webserver Component for the Flask application.

Key Components:
1. AMI: latest Amazon Linux 2 (HVM, general purpose gp2 storage).
2. User Data: bootstrap script read from disk and attached verbatim. Runs
   ONCE at first boot.
3. Instance Profile: links the webserver IAM role to the instance.
4. Placement:
   - subnet_id: PUBLIC subnet with a public IP, reachable from the internet.
   - security_group_id: only the application port is open inbound.
5. IMDSv2 (http_tokens="required"): secures the metadata service.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.configs.constants import AMI_NAME_PATTERN
from rds_elasticache.utils.tags import create_tags


@dataclass
class WebserverOutputs:
    """Output values from webserver component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    public_dns: pulumi.Output[str]
    public_url: pulumi.Output[str]


class WebserverComponent(pulumi.ComponentResource):
    """
    Public EC2 instance running the web application.

    One instance, public-facing, assuming the webserver IAM role.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        user_data: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("rds-elasticache:compute:Webserver", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Latest Amazon Linux 2 AMI
        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=["amazon"],
            filters=[
                aws.ec2.GetAmiFilterArgs(
                    name="name",
                    values=[AMI_NAME_PATTERN],
                ),
                aws.ec2.GetAmiFilterArgs(
                    name="virtualization-type",
                    values=["hvm"],
                ),
            ],
        )

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=ami.id,
            instance_type=config.ec2_instance_type,
            subnet_id=subnet_id,
            associate_public_ip_address=True,
            vpc_security_group_ids=[security_group_id],
            iam_instance_profile=instance_profile_name,
            user_data=user_data,
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=create_tags(environment, f"{name}-webserver"),
            opts=child_opts,
        )

        self.public_url = pulumi.Output.concat(
            "http://", self.instance.public_dns, ":", str(config.app_port)
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "public_dns": self.instance.public_dns,
            "public_url": self.public_url,
        })

    def get_outputs(self) -> WebserverOutputs:
        """Get webserver output values."""
        return WebserverOutputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            public_dns=self.instance.public_dns,
            public_url=self.public_url,
        )
