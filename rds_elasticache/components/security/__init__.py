"""
Security components for IAM.

Components:
- IamRolesComponent: IAM role and instance profile for the webserver
"""

from rds_elasticache.components.security.iam_roles import (
    IamRolesComponent,
    IamRoleOutputs,
    secret_read_policy_document,
)

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "secret_read_policy_document",
]
