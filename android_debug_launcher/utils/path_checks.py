"""
Filesystem predicates used to validate directory attributes
"""

import os
import ntpath
import posixpath

# Characters a path may never contain on the current host
if os.name == 'nt':
    INVALID_PATH_CHARS = frozenset(['"', '<', '>', '|', '\0'] + [chr(c) for c in range(1, 32)])
else:
    INVALID_PATH_CHARS = frozenset(['\0'])


def has_invalid_path_chars(path: str) -> bool:
    """True if the path contains a character that is illegal on this host"""
    return any(char in INVALID_PATH_CHARS for char in path)


def is_path_rooted(path: str) -> bool:
    """
    True if the path is anchored to a root

    On Windows a drive ("C:") or a leading separator counts as rooted,
    matching how the host resolves such paths.
    """
    if os.name == 'nt':
        drive, rest = ntpath.splitdrive(path)
        return bool(drive) or rest.startswith(('\\', '/'))
    return posixpath.isabs(path)


def directory_exists(path: str) -> bool:
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def is_valid_directory(path: str) -> bool:
    """Apply the three directory predicates in order, stopping at the first failure"""
    if has_invalid_path_chars(path):
        return False
    if not is_path_rooted(path):
        return False
    return directory_exists(path)
