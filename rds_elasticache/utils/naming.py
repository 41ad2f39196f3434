"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

import re
from dataclasses import dataclass

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^a-z0-9-]+")


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'webserver-sg')

        Returns:
            Formatted resource name
        """
        return f"{self.project}-{self.environment}-{resource}"

    def identifier(self, resource: str, max_length: int = 63) -> str:
        """
        Generate a service identifier (RDS instance id, ElastiCache cluster id).

        These must be lowercase, start with a letter, contain only letters,
        digits and single hyphens, and must not end with a hyphen.

        Args:
            resource: Resource identifier
            max_length: Service-imposed length limit

        Returns:
            Sanitised identifier
        """
        raw = self.name(resource).lower()
        cleaned = _INVALID_IDENTIFIER_CHARS.sub("-", raw)
        cleaned = re.sub(r"-{2,}", "-", cleaned).strip("-")
        if not cleaned[:1].isalpha():
            cleaned = f"r-{cleaned}"
        return cleaned[:max_length].rstrip("-")


def secret_name_from_arn(arn: str) -> str:
    """
    Derive a Secrets Manager secret name from its ARN.

    Secret ARNs end with ``secret:<name>-<6 random chars>``.

    Args:
        arn: Secret ARN

    Returns:
        Secret name without the random suffix
    """
    _, sep, tail = arn.partition(":secret:")
    if not sep:
        raise ValueError(f"Not a Secrets Manager secret ARN: {arn!r}")
    name, dash, suffix = tail.rpartition("-")
    if not dash or len(suffix) != 6:
        return tail
    return name
