"""
ElastiCache Redis Component for the in-memory cache.

A single-node Redis cluster (no replication group) placed in the private
subnets through a cache subnet group. Only the webserver security group can
reach it, on port 6379.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.configs.constants import CACHE_DEFAULTS, PORTS
from rds_elasticache.utils.tags import create_tags


@dataclass
class RedisOutputs:
    """Output values from ElastiCache component."""
    cluster_id: pulumi.Output[str]
    address: pulumi.Output[str]
    port: pulumi.Output[int]


class ElastiCacheRedisComponent(pulumi.ComponentResource):
    """ElastiCache for Redis cluster with one cache node."""

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        cluster_id: str,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("rds-elasticache:storage:ElastiCacheRedis", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.subnet_group = aws.elasticache.SubnetGroup(
            f"{name}-subnet-group",
            name=f"{cluster_id}-subnets",
            subnet_ids=subnet_ids,
            description="subnet group for redis",
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        self.cluster = aws.elasticache.Cluster(
            f"{name}-redis",
            cluster_id=cluster_id,
            engine=str(CACHE_DEFAULTS["engine"]),
            node_type=config.cache_node_type,
            num_cache_nodes=int(CACHE_DEFAULTS["num_cache_nodes"]),
            port=PORTS["redis"],
            subnet_group_name=self.subnet_group.name,
            security_group_ids=[security_group_id],
            apply_immediately=True,
            tags=create_tags(environment, f"{name}-redis"),
            opts=child_opts,
        )

        # Single-node clusters expose their endpoint on the only cache node
        self.address = self.cluster.cache_nodes.apply(
            lambda nodes: nodes[0].address if nodes else ""
        )

        self.register_outputs({
            "cluster_id": self.cluster.cluster_id,
            "address": self.address,
            "port": self.cluster.port,
        })

    def get_outputs(self) -> RedisOutputs:
        """Get ElastiCache output values."""
        return RedisOutputs(
            cluster_id=self.cluster.cluster_id,
            address=self.address,
            port=self.cluster.port,
        )
