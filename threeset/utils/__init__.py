"""Utility modules for threeset."""

from .io_utils import load_settings, reload_settings, validate_settings
from .logging_utils import get_logger, setup_logging
from .path_utils import get_config_path, get_project_root
from .union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "get_config_path",
    "get_logger",
    "get_project_root",
    "load_settings",
    "reload_settings",
    "setup_logging",
    "validate_settings",
]
