"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.configs.environment import get_config, parse_app_port
from rds_elasticache.configs.errors import (
    BootstrapScriptError,
    ConfigurationError,
    InvalidPortError,
    MissingConfigError,
)
from rds_elasticache.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDRS,
    DEFAULT_TAGS,
    PORTS,
)

__all__ = [
    "StackConfig",
    "get_config",
    "parse_app_port",
    "ConfigurationError",
    "MissingConfigError",
    "InvalidPortError",
    "BootstrapScriptError",
    "VPC_CIDR",
    "SUBNET_CIDRS",
    "DEFAULT_TAGS",
    "PORTS",
]
