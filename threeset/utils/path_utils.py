"""Path utilities for threeset."""

from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def get_config_path(filename: str = "settings.yaml") -> Path:
    """Get the path to a config file.

    Looks for a ``config/`` directory holding the file in the current
    directory and its parents, then next to the package.

    Args:
        filename: Name of the config file (default: settings.yaml)

    Returns:
        Path to the config file (may not exist)

    """
    current = Path.cwd()
    for parent in [current] + list(current.parents):
        candidate = parent / "config" / filename
        if candidate.exists():
            return candidate

    return get_project_root() / "config" / filename
