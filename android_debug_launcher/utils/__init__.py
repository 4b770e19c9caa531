from .path_checks import (
    directory_exists,
    has_invalid_path_chars,
    is_path_rooted,
    is_valid_directory,
)
from .resources import LauncherResources

# Define public API for the utils package
__all__ = [
    # Filesystem predicates
    "directory_exists",
    "has_invalid_path_chars",
    "is_path_rooted",
    "is_valid_directory",

    # Messages
    "LauncherResources",
]
