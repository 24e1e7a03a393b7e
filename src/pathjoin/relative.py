"""Break a path into the part below a base directory."""

from collections.abc import Iterable, Iterator
from typing import Final

# Shared result for "nothing below the base"; never built per call.
DOT: Final = "."


def relative_name(path: str, base_dir: str) -> str:
    """
    Return the part of path that lies below base_dir.

    Works like GNU basename with a directory instead of a suffix. When
    base_dir is not a whole-segment prefix of path, path comes back as is
    (minus leading "./"); when nothing is left below base_dir the result
    is DOT. Neither argument is resolved against the filesystem.

        path        base_dir    result
        /usr/lib    /           /usr/lib
        /usr/lib    /usr        lib
        /usr        /usr        .
        /           *           /
        .           *           .
        ..          *           ..

    Args:
        path: Pathname to break
        base_dir: Base directory path

    Returns:
        A suffix of path, or DOT
    """
    while path.startswith("./"):
        path = path[2:]
    while base_dir.startswith("./"):
        base_dir = base_dir[2:]

    size = len(base_dir)
    if base_dir == ".":
        size = 0
    if size > 0 and base_dir[size - 1] == "/":
        size -= 1

    if size > 0 and path.startswith(base_dir[:size]):
        rest = path[size:]
        # "/usr" must not match "/usress"
        if not rest or rest[0] == "/":
            return rest.lstrip("/") or DOT

    return path or DOT


def relative_names(paths: Iterable[str], base_dir: str) -> Iterator[str]:
    """Yield relative_name() of each path against the same base_dir."""
    for path in paths:
        yield relative_name(path, base_dir)
