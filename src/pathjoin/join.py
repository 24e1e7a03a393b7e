"""Join a base directory with a sub-path or file name."""


def _strip_dot_slash(path: str) -> str:
    """Drop any number of leading "./" prefixes."""
    while path.startswith("./"):
        path = path[2:]
    return path


def join_name(path: str, name: str) -> str:
    """
    Join a base directory path and a sub-path or file name.

    A path or name that is exactly "." counts as empty, leading "./"
    prefixes are removed from both, and leading "/" from name. A single
    "/" is inserted only when both parts are non-empty and path does not
    already end with one. Two empty parts give ".".

    "./", "../" and repeated "/" anywhere else are left untouched:

        path    name    result
        /usr    lib     /usr/lib
        /usr    .       /usr
        /usr    ..      /usr/..
        .       lib     lib
        ..      lib     ../lib
        .       .       .
        ..      ..      ../..

    Args:
        path: Base directory
        name: Sub-directory path or file name

    Returns:
        A new path string
    """
    if path == ".":
        path = ""
    if name == ".":
        name = ""

    name = _strip_dot_slash(name)
    path = _strip_dot_slash(path)
    name = name.lstrip("/")

    if not path and not name:
        return "."
    if path and name and not path.endswith("/"):
        return f"{path}/{name}"
    return path + name
