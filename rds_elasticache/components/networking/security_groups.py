"""
Security Groups Component for Network Access Control.

Architectural Steps & Flow:
1. Create "Shell" Security Groups:
   - Webserver, Database and Redis groups are created without rules so they
     can be referenced by ID.

2. Define Rules:
   - Ingress: sourced from another group (identity-based) wherever possible.
     The webserver group is the only one open to the internet, and only on
     the application port.
   - Egress: all outbound traffic allowed on every group.

3. Access Patterns:
   - Webserver: Accepts the application port from 0.0.0.0/0.
   - Database: Accepts MySQL (3306) ONLY from the webserver group.
   - Redis: Accepts Redis (6379) ONLY from the webserver group.

Security groups are stateful: replies to allowed inbound traffic are allowed
automatically.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_elasticache.configs.constants import PORTS
from rds_elasticache.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    webserver_sg_id: pulumi.Output[str]
    database_sg_id: pulumi.Output[str]
    redis_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the webserver, MySQL and Redis tiers.

    Only the webserver is reachable from the internet; the data tiers
    accept connections from the webserver group alone.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        app_port: int,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("rds-elasticache:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.webserver_sg = aws.ec2.SecurityGroup(
            f"{name}-webserver-sg",
            description="Security group for the public webserver EC2",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-webserver-sg"),
            opts=child_opts,
        )

        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="Security group for RDS MySQL",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-database-sg"),
            opts=child_opts,
        )

        self.redis_sg = aws.ec2.SecurityGroup(
            f"{name}-redis-sg",
            description="Security group for ElastiCache Redis",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-redis-sg"),
            opts=child_opts,
        )

        self._create_rules(name, app_port, child_opts)

        self.register_outputs({
            "webserver_sg_id": self.webserver_sg.id,
            "database_sg_id": self.database_sg.id,
            "redis_sg_id": self.redis_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        app_port: int,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        # Webserver: application port from anywhere
        self.webserver_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-webserver-ingress-app",
            security_group_id=self.webserver_sg.id,
            ip_protocol="tcp",
            from_port=app_port,
            to_port=app_port,
            cidr_ipv4="0.0.0.0/0",
            description="Flask application",
            opts=opts,
        )

        # Database: MySQL from webserver
        self.database_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-webserver",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            referenced_security_group_id=self.webserver_sg.id,
            description="Allow MySQL connection",
            opts=opts,
        )

        # Redis: Redis from webserver
        self.redis_ingress = aws.vpc.SecurityGroupIngressRule(
            f"{name}-redis-ingress-webserver",
            security_group_id=self.redis_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["redis"],
            to_port=PORTS["redis"],
            referenced_security_group_id=self.webserver_sg.id,
            description="Allow Redis connection",
            opts=opts,
        )

        for tier, group in [
            ("webserver", self.webserver_sg),
            ("database", self.database_sg),
            ("redis", self.redis_sg),
        ]:
            aws.vpc.SecurityGroupEgressRule(
                f"{name}-{tier}-egress-all",
                security_group_id=group.id,
                ip_protocol="-1",
                cidr_ipv4="0.0.0.0/0",
                description="All outbound traffic",
                opts=opts,
            )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            webserver_sg_id=self.webserver_sg.id,
            database_sg_id=self.database_sg.id,
            redis_sg_id=self.redis_sg.id,
        )
