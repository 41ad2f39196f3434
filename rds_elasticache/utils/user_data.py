"""Bootstrap script loading for EC2 user data."""

from pathlib import Path

from rds_elasticache.configs.errors import BootstrapScriptError


def load_user_data(path: Path) -> str:
    """
    Read a bootstrap script verbatim.

    The script is treated as an opaque payload and attached to the
    instance exactly as it is on disk.

    Args:
        path: Location of the shell script

    Returns:
        Script contents

    Raises:
        BootstrapScriptError: If the file is missing, unreadable or empty
    """
    try:
        script = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BootstrapScriptError(f"Cannot read bootstrap script {path}: {e}") from e

    if not script.strip():
        raise BootstrapScriptError(f"Bootstrap script {path} is empty")

    return script
