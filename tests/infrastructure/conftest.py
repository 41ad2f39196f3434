"""Pytest fixtures for infrastructure tests."""

import itertools
from pathlib import Path

import pulumi
import pytest

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.configs.constants import DEFAULT_USER_DATA_PATH
from rds_elasticache.utils.naming import ResourceNamer

from pulumi_mocks import MOCKS, TopologyMocks

# Mocks must be registered before any resource is constructed
pulumi.runtime.set_mocks(MOCKS, project="rds-elasticache", stack="test", preview=False)

_environments = itertools.count()


@pytest.fixture
def mocks() -> TopologyMocks:
    """Return the registered Pulumi mocks."""
    return MOCKS


@pytest.fixture
def package_root() -> Path:
    """Return the rds_elasticache package directory."""
    return Path(__file__).parent.parent.parent / "rds_elasticache"


@pytest.fixture
def python_files_in_package(package_root):
    """Return all Python files in the package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def make_config():
    """
    Build StackConfig objects with a unique environment name.

    Resource names embed the environment, so each stack declared in the
    test session gets distinct URNs.
    """

    def _make(app_port: int = 5000, **overrides) -> StackConfig:
        values = {
            "environment": f"test{next(_environments)}",
            "app_port": app_port,
            "ec2_instance_type": "t3.micro",
            "rds_instance_class": "db.t3.micro",
            "rds_engine_version": "8.0",
            "rds_allocated_storage": 20,
            "cache_node_type": "cache.t3.micro",
            "user_data_path": DEFAULT_USER_DATA_PATH,
        }
        values.update(overrides)
        return StackConfig(**values)

    return _make


@pytest.fixture
def namer_for():
    """Return the namer declare_stack uses for a given config."""

    def _namer(config: StackConfig) -> ResourceNamer:
        return ResourceNamer(project="rds-elasticache", environment=config.environment)

    return _namer
