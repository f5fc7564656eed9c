"""Path normalization and resolution.

Every path wren hands out is absolute and normalized: it starts with
``/``, has no empty, ``.`` or ``..`` segments, and only ends with ``/``
when it is the root itself.

Usage::

    from wren.paths import resolve

    resolve("/news", "latest")       # "/news/latest"
    resolve("/news", "/home")        # "/home"
    resolve("/news/latest", "..")    # "/news"
"""


def normalize_path(*parts: str) -> str:
    """Join *parts* with ``/`` and normalize the result.

    Repeated slashes collapse, ``.`` segments disappear, and ``..`` pops
    the previous segment. A ``..`` at the root is a no-op, so extra
    ``..`` segments simply stop consuming.

    Examples::

        >>> normalize_path("///unnecessary///slashes")
        '/unnecessary/slashes'
        >>> normalize_path("/settings", "../../..")
        '/'
        >>> normalize_path("home//")
        '/home'
    """
    segments: list[str] = []
    for segment in "/".join(parts).split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)
    return "/" + "/".join(segments)


def resolve(base: str, target: str) -> str:
    """Resolve *target* against *base*.

    A target starting with ``/`` is absolute and ignores *base*.
    Anything else is joined to *base* with a separating ``/``.
    """
    if target.startswith("/"):
        return normalize_path(target)
    return normalize_path(base, target)


def split_path(path: str) -> list[str]:
    """Return the normalized segments of *path*. The root has none."""
    normalized = normalize_path(path)
    if normalized == "/":
        return []
    return normalized[1:].split("/")
