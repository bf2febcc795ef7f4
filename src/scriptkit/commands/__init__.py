"""Subcommands: registered into the generic dispatcher in scriptkit.cli."""

import logging
import os
from datetime import date
from pathlib import Path

logger = logging.getLogger("scriptkit.cli")


def _add(subparsers, name: str, help_text: str, func, needs_config: bool = True):
    parser = subparsers.add_parser(name, help=help_text)
    parser.set_defaults(func=func, needs_config=needs_config)
    return parser


def register_commands(subparsers) -> None:
    """Register every scriptkit subcommand with the top-level dispatcher."""
    parser = _add(
        subparsers,
        "check-deps",
        "Print missing commands on one line; exit 1 if any are missing",
        _cmd_check_deps,
    )
    parser.add_argument(
        "names", nargs="*", metavar="NAME", help="default: the config's [tools]"
    )
    parser.add_argument(
        "--path",
        metavar="DIRS",
        help=f"search path to use instead of $PATH ('{os.pathsep}'-separated)",
    )
    parser.add_argument(
        "--hints", action="store_true", help="log install hints for missing tools"
    )

    parser = _add(subparsers, "weekday", "Print a weekday name", _cmd_weekday)
    parser.add_argument(
        "day", nargs="?", help="0..7 (0 and 7 are Sunday) or an ISO date"
    )
    parser.add_argument("--short", action="store_true", help="abbreviated name")

    parser = _add(subparsers, "abspath", "Print a path made absolute", _cmd_abspath)
    parser.add_argument("path")
    parser.add_argument("--base", metavar="DIR", help="default: working directory")
    parser.add_argument("--resolve", action="store_true", help="resolve symlinks")

    parser = _add(
        subparsers, "trim-slash", "Print a path without trailing slashes", _cmd_trim
    )
    parser.add_argument("path")

    parser = _add(subparsers, "log", "Log a message to stderr and syslog", _cmd_log)
    parser.add_argument("level", help="debug, info, notice, warn, err, crit")
    parser.add_argument("message", nargs="+")

    parser = _add(
        subparsers,
        "remove",
        "Remove files or directories, refusing / and $HOME",
        _cmd_remove,
    )
    parser.add_argument("paths", nargs="+", metavar="PATH")
    parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="only remove empty directories",
    )
    parser.add_argument("--dry-run", action="store_true")

    parser = _add(
        subparsers,
        "init",
        "Write a starter scriptkit.toml",
        _cmd_init,
        needs_config=False,
    )
    parser.add_argument("--force", action="store_true", help="overwrite existing file")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _cmd_check_deps(args, config: dict) -> int:
    from scriptkit.dependencies import check_dependencies

    tools = config["tools"]
    names = args.names or list(tools)
    search_path = args.path.split(os.pathsep) if args.path is not None else None

    report = check_dependencies(names, search_path)
    if report.ok:
        return 0

    print(report.line())
    if args.hints:
        for name in report.missing:
            logger.warning(
                "%s not found. Install from: %s",
                name,
                tools.get(name, "no install hint configured"),
            )
    return 1


def _parse_day(text):
    if text is None:
        return None
    if text.isdigit():
        return int(text)
    return date.fromisoformat(text)


def _cmd_weekday(args, config: dict) -> int:
    from scriptkit.weekdays import weekday_name

    print(weekday_name(_parse_day(args.day), abbreviated=args.short))
    return 0


def _cmd_abspath(args, config: dict) -> int:
    from scriptkit.paths import absolute_path

    print(absolute_path(args.path, args.base, resolve_links=args.resolve))
    return 0


def _cmd_trim(args, config: dict) -> int:
    from scriptkit.paths import trim_trailing_slash

    print(trim_trailing_slash(args.path))
    return 0


def _cmd_log(args, config: dict) -> int:
    from scriptkit.logging import log

    log(args.level, " ".join(args.message))
    return 0


def _cmd_remove(args, config: dict) -> int:
    from scriptkit.errors import UnsafeRemovalError
    from scriptkit.paths import safe_remove

    refused = False
    for path in args.paths:
        try:
            safe_remove(path, recursive=not args.no_recursive, dry_run=args.dry_run)
        except (UnsafeRemovalError, OSError) as exc:
            logger.error("%s", exc)
            refused = True
    return 1 if refused else 0


def _cmd_init(args, config: dict) -> int:
    from scriptkit.config import (
        CONFIG_FILENAME,
        DEFAULT_LOGGING,
        STARTER_TOOLS,
        write_config,
    )

    target = Path(args.config) if args.config else Path.cwd() / CONFIG_FILENAME
    if target.exists() and not args.force:
        logger.error("%s already exists (use --force to overwrite)", target)
        return 1

    write_config(target, {"tools": STARTER_TOOLS, "logging": DEFAULT_LOGGING})
    print(f"Wrote {target}")
    return 0
