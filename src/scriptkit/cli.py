"""
Generic CLI dispatcher for scriptkit.

Subcommands are registered by scriptkit.commands.register_commands(). Each
handler receives the parsed args and the loaded config and returns an exit
status, so shell scripts can branch on it.
"""

import argparse
import logging
import sys

from scriptkit import __version__
from scriptkit.config import default_config, load_config
from scriptkit.errors import ConfigError, ScriptkitError
from scriptkit.logging import configure_logging

logger = logging.getLogger("scriptkit.cli")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="scriptkit",
        description="Reusable helpers for automation and shell scripts.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", metavar="PATH", help="config file (default: ./scriptkit.toml)"
    )
    parser.add_argument("--log-level", metavar="LEVEL", help="debug, info, warn, ...")
    parser.add_argument("--tag", help="program tag used for syslog records")
    parser.add_argument(
        "--no-syslog", action="store_true", help="log to stderr only"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable colored log output"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    from scriptkit.commands import register_commands

    register_commands(subparsers)

    return parser


def _setup_logging(args, config: dict) -> None:
    settings = config["logging"]
    configure_logging(
        tag=args.tag or settings["tag"],
        level=args.log_level or settings["level"],
        syslog=settings["syslog"] and not args.no_syslog,
        color=settings["color"] and not args.no_color,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.needs_config else default_config()
        _setup_logging(args, config)
    except (ConfigError, ValueError) as exc:
        print(f"scriptkit: error: {exc}", file=sys.stderr)
        return 2

    try:
        return args.func(args, config) or 0
    except (ValueError, TypeError) as exc:
        logger.error("%s", exc)
        logger.debug("Traceback:", exc_info=True)
        return 2
    except (ScriptkitError, OSError) as exc:
        logger.error("%s", exc)
        logger.debug("Traceback:", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
