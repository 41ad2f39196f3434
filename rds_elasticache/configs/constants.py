"""
Infrastructure constants for the RDS + ElastiCache stack.

Contains CIDR blocks, instance types, engine versions and default tags.
"""

from pathlib import Path
from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Subnet CIDR blocks, one /24 per availability zone
SUBNET_CIDRS: Final[dict[str, list[str]]] = {
    "public": ["10.0.0.0/24", "10.0.1.0/24"],   # Webserver, NAT gateway
    "private": ["10.0.2.0/24", "10.0.3.0/24"],  # RDS MySQL, ElastiCache Redis
}

# Availability zones (us-east-1)
AVAILABILITY_ZONES: Final[list[str]] = [
    "us-east-1a",
    "us-east-1b",
]

# Compute
EC2_INSTANCE_TYPE: Final[str] = "t3.micro"
AMI_NAME_PATTERN: Final[str] = "amzn2-ami-hvm-*-x86_64-gp2"

# RDS MySQL configuration
RDS_DEFAULTS: Final[dict[str, str | int]] = {
    "engine": "mysql",
    "engine_version": "8.0",
    "instance_class": "db.t3.micro",
    "allocated_storage": 20,
    "database_name": "covid",
    "username": "admin",
}

# ElastiCache Redis configuration
CACHE_DEFAULTS: Final[dict[str, str | int]] = {
    "engine": "redis",
    "node_type": "cache.t3.micro",
    "num_cache_nodes": 1,
}

# Managed policies attached to the webserver role
WEBSERVER_MANAGED_POLICIES: Final[dict[str, str]] = {
    "ssm-core": "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore",
    "cfn-read-only": "arn:aws:iam::aws:policy/AWSCloudFormationReadOnlyAccess",
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "rds-elasticache",
    "ManagedBy": "pulumi",
    "Lifecycle": "ephemeral",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "mysql": 3306,
    "redis": 6379,
}

# Valid TCP port range for the application port
PORT_RANGE: Final[tuple[int, int]] = (1, 65535)

# Bootstrap script shipped with the package
DEFAULT_USER_DATA_PATH: Final[Path] = Path(__file__).resolve().parent.parent / "bootstrap" / "user_data.sh"
