"""Pathjoin domain exceptions."""


class PathjoinError(Exception):
    """Base exception for all pathjoin errors."""


class ConfigError(PathjoinError):
    """Raised when a configuration file cannot be used."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config file '{path}': {reason}")
