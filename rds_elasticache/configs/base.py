"""
Base configuration dataclass for stack settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StackConfig:
    """
    Stack-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        app_port: TCP port the webserver application listens on
        ec2_instance_type: EC2 instance type for the webserver
        rds_instance_class: RDS instance class for MySQL
        rds_engine_version: MySQL engine version
        rds_allocated_storage: RDS storage in GB
        cache_node_type: ElastiCache node type for Redis
        user_data_path: Bootstrap script attached to the webserver
    """
    environment: str
    app_port: int
    ec2_instance_type: str
    rds_instance_class: str
    rds_engine_version: str
    rds_allocated_storage: int
    cache_node_type: str
    user_data_path: Path

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
        }
