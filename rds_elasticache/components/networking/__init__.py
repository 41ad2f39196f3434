"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public/private subnets, NAT gateway, route tables
- SecurityGroupsComponent: Security groups for webserver, database, redis
"""

from rds_elasticache.components.networking.vpc import VpcComponent, VpcOutputs
from rds_elasticache.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
