"""Exceptions raised by scriptkit."""


class ScriptkitError(Exception):
    """Base class for scriptkit errors."""


class MissingDependency(ScriptkitError):
    """A required external command is not resolvable on the search path."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required command '{name}' not found on the search path.")
        self.name = name


class ConfigError(ScriptkitError):
    """Raised when a config file cannot be read or has invalid values."""


class UnsafeRemovalError(ScriptkitError):
    """Raised when a removal target is refused (root, home, empty path)."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Refusing to remove '{path}': {reason}.")
        self.path = path
        self.reason = reason
