"""
Path helpers: absolute-path resolution, trailing-slash trimming and safe removal.

safe_remove refuses to touch the filesystem root, the user's home directory
or any directory containing it. Symlinks are removed, never followed.
"""

import logging
import os
import shutil

from scriptkit.errors import UnsafeRemovalError

logger = logging.getLogger(__name__)

_SEPARATORS = os.sep + (os.altsep or "")


def trim_trailing_slash(path: str) -> str:
    """Strip trailing separators; a path of only separators becomes the root."""
    path = os.fspath(path)
    trimmed = path.rstrip(_SEPARATORS)
    if path and not trimmed:
        return path[0]
    return trimmed


def absolute_path(path, base=None, *, resolve_links: bool = False) -> str:
    """
    Return `path` as a normalized absolute path.

    Relative paths are joined onto `base` (default: the working directory).
    The path does not have to exist. With resolve_links, symlinks are
    resolved as `readlink -f` would.
    """
    path = os.fspath(path)
    if not path:
        raise ValueError("Path must not be empty")

    base = os.getcwd() if base is None else os.path.abspath(os.fspath(base))
    joined = os.path.join(base, path)
    if resolve_links:
        return os.path.realpath(joined)
    return os.path.normpath(joined)


# ---------------------------------------------------------------------------
# Removal
# ---------------------------------------------------------------------------


def _home_dirs() -> set:
    home = os.path.expanduser("~")
    if home == "~":
        return set()
    return {os.path.normpath(home), os.path.realpath(home)}


def _check_removable(original: str, target: str) -> None:
    if os.path.dirname(target) == target:
        raise UnsafeRemovalError(original, "filesystem root")
    for home in _home_dirs():
        if os.path.commonpath([target, home]) == target:
            raise UnsafeRemovalError(original, "home directory or one of its parents")


def safe_remove(path, *, recursive: bool = True, dry_run: bool = False) -> bool:
    """
    Remove a file, symlink or directory if it exists.

    Returns True if something was removed (or would be, with dry_run) and
    False if nothing exists at `path`. Raises UnsafeRemovalError for empty
    paths, the root and the home directory.
    """
    original = os.fspath(path)
    if not original.strip():
        raise UnsafeRemovalError(original, "empty path")

    # "link/" would otherwise be treated as the directory the link points to
    target = absolute_path(trim_trailing_slash(original))
    _check_removable(original, target)

    if os.path.islink(target):
        kind = "symlink"
    elif not os.path.lexists(target):
        logger.debug("Nothing to remove at %s", target)
        return False
    else:
        _check_removable(original, os.path.realpath(target))
        kind = "directory" if os.path.isdir(target) else "file"

    if dry_run:
        logger.info("Would remove %s %s", kind, target)
        return True

    if kind == "directory":
        if recursive:
            shutil.rmtree(target)
        else:
            os.rmdir(target)
    else:
        os.unlink(target)

    logger.info("Removed %s %s", kind, target)
    return True
