"""Get svcctl home directory path or path under it."""

import os
from pathlib import Path

SVCCTL_HOME_EXT = ".svcctl"


def get_home_dir(*parts: str) -> Path:
    """Get svcctl home directory path or path under it.

    Checks SVCCTL_HOME environment variable first, defaults to ~/.svcctl if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logfile")

    Returns:
        Absolute path to svcctl home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.svcctl")
        >>> get_home_dir("config.json")
        Path("/home/user/.svcctl/config.json")
    """
    home_env = os.environ.get("SVCCTL_HOME")
    if home_env:
        svcctl_home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        svcctl_home = Path(user_home) / SVCCTL_HOME_EXT if user_home else Path.home() / SVCCTL_HOME_EXT

    return svcctl_home / Path(*parts) if parts else svcctl_home
