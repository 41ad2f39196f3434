"""
Stack declaration for the RDS + ElastiCache web application.

Instantiates all component resources in dependency order:
1. VPC → Security Groups → IAM Role
2. RDS MySQL, ElastiCache Redis (private subnets)
3. EC2 webserver (public subnet)
4. Output values read back from the created resources
"""

from dataclasses import dataclass, field

import pulumi

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.utils.naming import ResourceNamer
from rds_elasticache.utils.user_data import load_user_data

from rds_elasticache.components.networking.vpc import VpcComponent
from rds_elasticache.components.networking.security_groups import SecurityGroupsComponent
from rds_elasticache.components.security.iam_roles import IamRolesComponent
from rds_elasticache.components.storage.rds_mysql import RdsMysqlComponent
from rds_elasticache.components.storage.elasticache_redis import ElastiCacheRedisComponent
from rds_elasticache.components.compute.webserver import WebserverComponent

PROJECT_NAME = "rds-elasticache"

# ElastiCache cluster ids are limited to 40 characters
CACHE_CLUSTER_ID_MAX_LENGTH = 40


@dataclass
class StackResources:
    """Components declared for one stack, plus the exported values."""
    vpc: VpcComponent
    security_groups: SecurityGroupsComponent
    iam_roles: IamRolesComponent
    database: RdsMysqlComponent
    cache: ElastiCacheRedisComponent
    webserver: WebserverComponent
    outputs: dict[str, pulumi.Output] = field(default_factory=dict)


def declare_stack(
    config: StackConfig,
    namer: ResourceNamer | None = None,
) -> StackResources:
    """
    Declare the full resource graph for one stack.

    Args:
        config: Validated stack configuration
        namer: Resource namer (defaults to the project namer for the environment)

    Returns:
        StackResources: Declared components and output values
    """
    namer = namer or ResourceNamer(project=PROJECT_NAME, environment=config.environment)
    base_name = namer.name("stack")

    pulumi.log.info(
        f"Declaring {base_name} (environment={config.environment}, app_port={config.app_port})"
    )

    # Read before any resource is declared so a bad path fails fast
    user_data = load_user_data(config.user_data_path)

    # --- Layer 1: Networking ---
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        app_port=config.app_port,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: IAM ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
    )
    iam_outputs = iam_roles.get_outputs()

    # --- Layer 3: Data tier ---
    database = RdsMysqlComponent(
        name=namer.name("db"),
        environment=config.environment,
        config=config,
        identifier=namer.identifier("mysql"),
        subnet_ids=vpc_outputs.private_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
    )
    db_outputs = database.get_outputs()

    cache = ElastiCacheRedisComponent(
        name=namer.name("cache"),
        environment=config.environment,
        config=config,
        cluster_id=namer.identifier("redis", max_length=CACHE_CLUSTER_ID_MAX_LENGTH),
        subnet_ids=vpc_outputs.private_subnet_ids,
        security_group_id=sg_outputs.redis_sg_id,
    )
    cache_outputs = cache.get_outputs()

    # --- Layer 4: Compute ---
    webserver = WebserverComponent(
        name=namer.name("web"),
        environment=config.environment,
        config=config,
        subnet_id=vpc_outputs.public_subnet_ids[0],
        security_group_id=sg_outputs.webserver_sg_id,
        instance_profile_name=iam_outputs.webserver_instance_profile_name,
        user_data=user_data,
    )
    web_outputs = webserver.get_outputs()

    outputs = {
        "secret_name": db_outputs.secret_name,
        "mysql_endpoint": db_outputs.address,
        "redis_endpoint": cache_outputs.address,
        "webserver_public_ip": web_outputs.public_ip,
        "webserver_public_url": web_outputs.public_url,
    }

    return StackResources(
        vpc=vpc,
        security_groups=security_groups,
        iam_roles=iam_roles,
        database=database,
        cache=cache,
        webserver=webserver,
        outputs=outputs,
    )
