"""Config reading and writing for scriptkit."""

from pathlib import Path

import tomli

from scriptkit.errors import ConfigError
from scriptkit.logging import parse_level

CONFIG_FILENAME = "scriptkit.toml"

DEFAULT_LOGGING = {
    "tag": "scriptkit",
    "level": "info",
    "syslog": True,
    "color": True,
}

STARTER_TOOLS = {
    "git": "https://git-scm.com/",
}


# ---------------------------------------------------------------------------
# TOML helpers
# ---------------------------------------------------------------------------


_TOML_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _toml_char(c: str) -> str:
    if c in _TOML_ESCAPES:
        return _TOML_ESCAPES[c]
    if ord(c) < 0x20 or ord(c) == 0x7F:
        return f"\\u{ord(c):04X}"
    return c


def _toml_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    text = "".join(_toml_char(c) for c in str(value))
    return f'"{text}"'


def _toml_key(key: str) -> str:
    if key and all((c.isascii() and c.isalnum()) or c in "-_" for c in key):
        return key
    return _toml_value(key)


def _validate(data: dict, source) -> dict:
    tools = data.get("tools", {})
    if not isinstance(tools, dict) or not all(
        isinstance(hint, str) for hint in tools.values()
    ):
        raise ConfigError(f"{source}: [tools] must map command names to strings")

    logging_section = data.get("logging", {})
    if not isinstance(logging_section, dict):
        raise ConfigError(f"{source}: [logging] must be a table")
    unknown = set(logging_section) - set(DEFAULT_LOGGING)
    if unknown:
        raise ConfigError(
            f"{source}: unknown [logging] keys: {', '.join(sorted(unknown))}"
        )

    merged = {**DEFAULT_LOGGING, **logging_section}
    for key, default in DEFAULT_LOGGING.items():
        if type(merged[key]) is not type(default):
            raise ConfigError(
                f"{source}: logging.{key} must be {type(default).__name__}"
            )
    try:
        parse_level(merged["level"])
    except ValueError as exc:
        raise ConfigError(f"{source}: {exc}") from exc

    return {"tools": dict(tools), "logging": merged}


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def default_config() -> dict:
    return {"tools": {}, "logging": dict(DEFAULT_LOGGING)}


def read_config(path: Path) -> dict:
    """Read and validate a scriptkit TOML config, filling in defaults."""
    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    return _validate(data, path)


def load_config(path: Path | None = None, cwd: Path | None = None) -> dict:
    """
    Load the config at `path`, else scriptkit.toml in `cwd` if present,
    else return the defaults.
    """
    if path is not None:
        return read_config(Path(path))
    candidate = Path(cwd or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return read_config(candidate)
    return default_config()


def write_config(path: Path, config: dict) -> None:
    """Write `config` as TOML to `path`."""
    lines = ["[tools]"]
    for name, hint in config.get("tools", {}).items():
        lines.append(f"{_toml_key(name)} = {_toml_value(hint)}")
    lines.append("")
    lines.append("[logging]")
    for key, value in {**DEFAULT_LOGGING, **config.get("logging", {})}.items():
        lines.append(f"{key} = {_toml_value(value)}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
