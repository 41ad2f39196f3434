"""
Tag factory for the stack's AWS resources.

Every resource carries the project-wide defaults (Project, ManagedBy,
Lifecycle) plus its environment and name. Subnets additionally carry a
Tier tag so the public and private tiers can be told apart in the console.
"""

from rds_elasticache.configs.constants import DEFAULT_TAGS

RESERVED_TAG_KEYS = frozenset({*DEFAULT_TAGS, "Environment", "Name", "Tier"})


def create_tags(
    environment: str,
    resource_name: str,
    tier: str | None = None,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Build the tag set for one resource.

    Args:
        environment: Stack environment (dev, staging, ...)
        resource_name: Pulumi name of the resource, used as the Name tag
        tier: Subnet tier ("public" or "private"), omitted when None
        **extra_tags: Resource-specific tags

    Raises:
        ValueError: If an extra tag would overwrite one of the standard tags
    """
    clashes = RESERVED_TAG_KEYS.intersection(extra_tags)
    if clashes:
        raise ValueError(f"Cannot override standard tags: {', '.join(sorted(clashes))}")

    tags = {**DEFAULT_TAGS, "Environment": environment, "Name": resource_name}
    if tier is not None:
        tags["Tier"] = tier
    tags.update(extra_tags)
    return tags
