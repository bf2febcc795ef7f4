"""
Pytest configuration and shared fixtures.

Marks:
    coreutils -- requires ls and cat on PATH

Tests decorated with this mark are skipped automatically when the commands
are absent, so the unit test suite always runs cleanly.
"""

import logging
import os
import shutil

import pytest

# ---------------------------------------------------------------------------
# Dependency detection
# ---------------------------------------------------------------------------

_HAVE_LS = shutil.which("ls") is not None
_HAVE_CAT = shutil.which("cat") is not None


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("coreutils") and not (_HAVE_LS and _HAVE_CAT):
            missing = [
                name
                for name, present in [("ls", _HAVE_LS), ("cat", _HAVE_CAT)]
                if not present
            ]
            item.add_marker(
                pytest.mark.skip(reason=f"coreutils missing: {', '.join(missing)}")
            )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def bin_dir(tmp_path):
    """A directory holding one executable ('tool') and one plain file ('data')."""
    directory = tmp_path / "bin"
    directory.mkdir()
    tool = directory / "tool"
    tool.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    tool.chmod(0o755)
    data = directory / "data"
    data.write_text("not a program\n", encoding="utf-8")
    data.chmod(0o644)
    return directory


@pytest.fixture(autouse=True)
def _reset_scriptkit_logger():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("scriptkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def home(tmp_path, monkeypatch):
    """Point $HOME at a throwaway directory."""
    directory = tmp_path / "home"
    directory.mkdir()
    monkeypatch.setenv("HOME", str(directory))
    if os.name == "nt":
        monkeypatch.setenv("USERPROFILE", str(directory))
    return directory
