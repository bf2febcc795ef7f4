"""Tests for the dependency checker."""

from unittest.mock import patch

import pytest

from scriptkit.dependencies import (
    DependencyReport,
    check_dependencies,
    find_missing,
    require_dependencies,
)
from scriptkit.errors import MissingDependency

# ---------------------------------------------------------------------------
# Real PATH scenarios
# ---------------------------------------------------------------------------


@pytest.mark.coreutils
def test_present_and_absent_commands():
    report = check_dependencies(["ls", "nonexistent_cmd_12345"])
    assert report.missing == ("nonexistent_cmd_12345",)
    assert report.ok is False


@pytest.mark.coreutils
def test_all_present_commands():
    report = check_dependencies(["ls", "cat"])
    assert report.missing == ()
    assert report.ok is True


def test_empty_input_is_success():
    report = check_dependencies([])
    assert report.ok is True
    assert report.missing == ()
    assert report.line() == ""


def test_duplicates_are_preserved():
    assert find_missing(["nonexistent_x", "nonexistent_x"]) == [
        "nonexistent_x",
        "nonexistent_x",
    ]


# ---------------------------------------------------------------------------
# Injected search path
# ---------------------------------------------------------------------------


def test_injected_search_path_finds_executable(bin_dir):
    assert find_missing(["tool"], search_path=[bin_dir]) == []


def test_injected_search_path_ignores_environment(bin_dir, monkeypatch):
    monkeypatch.setenv("PATH", str(bin_dir))
    assert find_missing(["tool"], search_path=[]) == ["tool"]


def test_non_executable_file_is_missing(bin_dir):
    assert find_missing(["data"], search_path=[bin_dir]) == ["data"]


def test_order_follows_input(bin_dir):
    names = ["zeta", "tool", "alpha", "data", "beta"]
    assert find_missing(names, search_path=[bin_dir]) == [
        "zeta",
        "alpha",
        "data",
        "beta",
    ]


def test_missing_is_subset_of_input(bin_dir):
    names = ["tool", "one", "two", "tool"]
    missing = find_missing(names, search_path=[bin_dir])
    assert all(name in names for name in missing)


def test_path_like_names_are_missing(bin_dir):
    assert find_missing([str(bin_dir / "tool"), ""], search_path=[bin_dir]) == [
        str(bin_dir / "tool"),
        "",
    ]


# ---------------------------------------------------------------------------
# Unset / empty PATH
# ---------------------------------------------------------------------------


def test_unset_path_reports_everything_missing(monkeypatch):
    monkeypatch.delenv("PATH", raising=False)
    assert find_missing(["ls", "sh"]) == ["ls", "sh"]


def test_empty_path_reports_everything_missing(monkeypatch):
    monkeypatch.setenv("PATH", "")
    assert find_missing(["ls", "sh"]) == ["ls", "sh"]


def test_path_is_read_on_every_call(bin_dir, monkeypatch):
    monkeypatch.setenv("PATH", "")
    assert find_missing(["tool"]) == ["tool"]
    monkeypatch.setenv("PATH", str(bin_dir))
    assert find_missing(["tool"]) == []


# ---------------------------------------------------------------------------
# DependencyReport
# ---------------------------------------------------------------------------


def test_report_errors_are_missing_dependency():
    report = DependencyReport(names=("a", "b", "c"), missing=("a", "c"))
    errors = report.errors
    assert all(isinstance(e, MissingDependency) for e in errors)
    assert [e.name for e in errors] == ["a", "c"]


def test_report_line_joins_with_spaces():
    report = DependencyReport(names=("a", "b"), missing=("a", "b"))
    assert report.line() == "a b"


def test_report_holds_string_tuples(bin_dir):
    report = check_dependencies(iter(["tool", "absent"]), search_path=[bin_dir])
    assert report.names == ("tool", "absent")
    assert report.missing == ("absent",)


# ---------------------------------------------------------------------------
# require_dependencies
# ---------------------------------------------------------------------------


def test_require_dependencies_all_present():
    tools = {"node": "https://nodejs.org/"}
    with patch("shutil.which", return_value="/usr/bin/something"):
        require_dependencies(tools, search_path=["/usr/bin"])  # should not exit


def test_require_dependencies_missing_exits(capsys):
    tools = {"jq": "https://jqlang.github.io/jq/"}

    with patch("shutil.which", return_value=None):
        with pytest.raises(SystemExit) as excinfo:
            require_dependencies(tools, search_path=["/usr/bin"])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "jq" in captured.err
    assert "https://jqlang.github.io/jq/" in captured.err