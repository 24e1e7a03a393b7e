"""Pathjoin: join and split pathnames as plain strings."""

from importlib.metadata import PackageNotFoundError, version

from pathjoin.config import PathjoinConfig
from pathjoin.exceptions import ConfigError, PathjoinError
from pathjoin.join import join_name
from pathjoin.relative import DOT, relative_name, relative_names

try:
    __version__ = version("pathjoin")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Running from a source checkout

__all__ = [
    "__version__",
    # Path operations
    "join_name",
    "relative_name",
    "relative_names",
    "DOT",
    # Configuration
    "PathjoinConfig",
    # Exceptions
    "PathjoinError",
    "ConfigError",
]
