"""
Configuration errors raised while declaring the stack.

All errors derive from pulumi.RunError so the engine reports them as a
program failure without a Python traceback.
"""

import pulumi


class ConfigurationError(pulumi.RunError):
    """Base class for invalid or incomplete stack configuration."""


class MissingConfigError(ConfigurationError):
    """A required configuration value was not provided."""

    def __init__(self, key: str, hint: str = "") -> None:
        self.key = key
        message = f"Missing required configuration value '{key}'"
        if hint:
            message = f"{message}: {hint}"
        super().__init__(message)


class InvalidPortError(ConfigurationError):
    """The application port is not an integer in the valid TCP range."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        super().__init__(f"Invalid application port {value!r}: {reason}")


class BootstrapScriptError(ConfigurationError):
    """The webserver bootstrap script could not be read."""
