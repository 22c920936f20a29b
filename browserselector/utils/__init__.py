"""Utility modules for common operations.

Modules:
    constants: Desktop entry keys, placeholder codes, timeouts
    search_paths: Load the search configuration from YAML
    check_prerequisites: Report which optional tools are installed
"""

from .search_paths import (
    SearchConfig,
    SearchPathConfigError,
    default_search_config,
    find_config_path,
    get_default_config_path,
    get_user_config_path,
    load_search_config,
    parse_search_config,
)
from .check_prerequisites import (
    check_all_prerequisites,
    format_human_readable,
)

__all__ = [
    # search_paths
    "SearchConfig",
    "SearchPathConfigError",
    "default_search_config",
    "find_config_path",
    "get_default_config_path",
    "get_user_config_path",
    "load_search_config",
    "parse_search_config",
    # check_prerequisites
    "check_all_prerequisites",
    "format_human_readable",
]
