"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and bootstrap script loading.
"""

from rds_elasticache.utils.naming import ResourceNamer, secret_name_from_arn
from rds_elasticache.utils.tags import create_tags
from rds_elasticache.utils.user_data import load_user_data

__all__ = [
    "ResourceNamer",
    "secret_name_from_arn",
    "create_tags",
    "load_user_data",
]
