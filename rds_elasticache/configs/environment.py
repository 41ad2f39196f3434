"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files. The
application port may also come from the APP_PORT environment variable.
"""

import os
from collections.abc import Mapping
from pathlib import Path

import pulumi

from rds_elasticache.configs.base import StackConfig
from rds_elasticache.configs.constants import (
    CACHE_DEFAULTS,
    DEFAULT_USER_DATA_PATH,
    EC2_INSTANCE_TYPE,
    PORT_RANGE,
    RDS_DEFAULTS,
)
from rds_elasticache.configs.errors import InvalidPortError, MissingConfigError

APP_PORT_ENV_VAR = "APP_PORT"


def parse_app_port(raw: str | int | None) -> int:
    """
    Parse and bounds-check the application port.

    Args:
        raw: Port as read from stack config or the environment

    Returns:
        int: Validated TCP port

    Raises:
        MissingConfigError: If no port was provided
        InvalidPortError: If the value is not an integer in 1-65535
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise MissingConfigError(
            "app_port",
            f"set it with `pulumi config set app_port <port>` or export {APP_PORT_ENV_VAR}",
        )

    if isinstance(raw, bool):
        raise InvalidPortError(raw, "expected an integer")

    if isinstance(raw, int):
        port = raw
    else:
        # ASCII digits only: int() would also take "+5000", "5_000" and
        # non-ASCII numerals
        digits = raw.strip()
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidPortError(raw, "expected an integer")
        port = int(digits, 10)

    low, high = PORT_RANGE
    if not low <= port <= high:
        raise InvalidPortError(raw, f"must be between {low} and {high}")

    return port


def get_config(
    config: pulumi.Config | None = None,
    environ: Mapping[str, str] | None = None,
) -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    Args:
        config: Pulumi config to read from (defaults to the project config)
        environ: Environment used for the APP_PORT fallback (defaults to os.environ)

    Returns:
        StackConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If the environment name is missing
        MissingConfigError: If no application port is configured
        InvalidPortError: If the application port is invalid
    """
    config = config or pulumi.Config()
    environ = os.environ if environ is None else environ

    raw_port = config.get("app_port")
    if raw_port is None:
        raw_port = environ.get(APP_PORT_ENV_VAR)
        if raw_port is not None:
            pulumi.log.warn(
                f"app_port not set in stack config, using {APP_PORT_ENV_VAR} from the environment"
            )

    user_data_path = config.get("user_data_path")

    return StackConfig(
        environment=config.require("environment"),
        app_port=parse_app_port(raw_port),
        ec2_instance_type=config.get("ec2_instance_type") or EC2_INSTANCE_TYPE,
        rds_instance_class=config.get("rds_instance_class") or str(RDS_DEFAULTS["instance_class"]),
        rds_engine_version=config.get("rds_engine_version") or str(RDS_DEFAULTS["engine_version"]),
        rds_allocated_storage=config.get_int("rds_allocated_storage") or int(RDS_DEFAULTS["allocated_storage"]),
        cache_node_type=config.get("cache_node_type") or str(CACHE_DEFAULTS["node_type"]),
        user_data_path=Path(user_data_path) if user_data_path else DEFAULT_USER_DATA_PATH,
    )
