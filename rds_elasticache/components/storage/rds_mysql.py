"""
RDS MySQL Component for Relational Database.

Access Control - Who Can Connect:
1. Webserver EC2 (webserver_sg) → Port 3306 ✅
2. Anyone else → DENIED ❌

How the Connection Works:
1. Placement: the DB subnet group spans the private subnets, so the instance
   has no public address and is reachable only from inside the VPC.
2. Security Group: database_sg only allows ingress on 3306 from webserver_sg.
3. Credentials: manage_master_user_password=True means AWS generates the
   password and stores it in Secrets Manager. The webserver reads it with
   secretsmanager:GetSecretValue once it knows the secret name.

Posture: this stack is disposable. Encryption at rest and deletion
protection are off and no final snapshot is taken on destroy.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.configs.constants import PORTS, RDS_DEFAULTS
from rds_elasticache.utils.naming import secret_name_from_arn
from rds_elasticache.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    address: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]
    secret_arn: pulumi.Output[str]
    secret_name: pulumi.Output[str]


class RdsMysqlComponent(pulumi.ComponentResource):
    """
    RDS MySQL database for the web application.

    Single-AZ instance in the private subnet tier.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        identifier: str,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("rds-elasticache:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.database_name = str(RDS_DEFAULTS["database_name"])

        # DB Subnet Group
        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            description="Private subnets for RDS MySQL",
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        # RDS Instance
        self.instance = aws.rds.Instance(
            f"{name}-mysql",
            identifier=identifier,
            engine=str(RDS_DEFAULTS["engine"]),
            engine_version=config.rds_engine_version,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            port=PORTS["mysql"],
            db_name=self.database_name,
            username=str(RDS_DEFAULTS["username"]),
            manage_master_user_password=True,  # AWS manages password in Secrets Manager
            iam_database_authentication_enabled=True,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            publicly_accessible=False,
            storage_encrypted=False,
            deletion_protection=False,
            skip_final_snapshot=True,
            backup_retention_period=1,
            apply_immediately=True,
            tags=create_tags(environment, f"{name}-mysql"),
            opts=child_opts,
        )

        self.secret_arn = self.instance.master_user_secrets.apply(
            lambda secrets: secrets[0].secret_arn if secrets else ""
        )
        self.secret_name = self.secret_arn.apply(
            lambda arn: secret_name_from_arn(arn) if arn else ""
        )

        self.register_outputs({
            "address": self.instance.address,
            "port": self.instance.port,
            "database_name": self.database_name,
            "secret_name": self.secret_name,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            address=self.instance.address,
            port=self.instance.port,
            database_name=pulumi.Output.from_input(self.database_name),
            secret_arn=self.secret_arn,
            secret_name=self.secret_name,
        )
