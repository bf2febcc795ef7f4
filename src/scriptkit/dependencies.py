"""
Reusable dependency checking for scripts built on scriptkit.

Each caller provides its own list (or name -> install hint mapping) of
required commands; this module resolves them against the search path.

The search path can be injected as a list of directories. When it is not,
PATH is read from the environment at call time, never cached.
"""

import logging
import os
import shutil
import sys
from dataclasses import dataclass

from scriptkit.errors import MissingDependency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencyReport:
    """Result of one dependency check."""

    names: tuple[str, ...]
    missing: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.missing

    @property
    def errors(self) -> list:
        return [MissingDependency(name) for name in self.missing]

    def line(self) -> str:
        """Missing names joined by single spaces (empty string if none)."""
        return " ".join(self.missing)


def _search_path_string(search_path) -> str:
    if search_path is None:
        # An unset PATH resolves nothing rather than falling back to os.defpath.
        return os.environ.get("PATH", "")
    return os.pathsep.join(str(d) for d in search_path)


def _is_bare_name(name: str) -> bool:
    if not name:
        return False
    separators = [os.sep] + ([os.altsep] if os.altsep else [])
    return not any(sep in name for sep in separators)


def find_missing(names, search_path=None) -> list:
    """
    Return the names that do not resolve to an executable, in input order.

    Args:
        names: iterable of bare command names; duplicates are kept
        search_path: directories to search instead of the PATH variable
    """
    path = _search_path_string(search_path)
    missing = []
    for name in names:
        if not path or not _is_bare_name(name):
            missing.append(name)
        elif shutil.which(name, path=path) is None:
            missing.append(name)
    for name in missing:
        logger.debug("Command not found: %s", name)
    return missing


def check_dependencies(names, search_path=None) -> DependencyReport:
    """Check every name and return a DependencyReport. Never exits."""
    names = tuple(names)
    return DependencyReport(
        names=names, missing=tuple(find_missing(names, search_path))
    )


def require_dependencies(tools: dict, search_path=None) -> None:
    """
    Verify that all tools in `tools` are resolvable.
    Prints install guidance and exits if any are missing.

    Args:
        tools: mapping of tool name -> install URL/instructions
    """
    report = check_dependencies(tools, search_path)
    if report.ok:
        return

    print("\nMissing required tools:\n", file=sys.stderr)
    for name in report.missing:
        hint = tools.get(name) or "no install hint configured"
        print(f"  {name:10s}  Install from: {hint}", file=sys.stderr)
    print(file=sys.stderr)
    sys.exit(1)
