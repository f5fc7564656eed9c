"""Route guards — decide whether a route applies to the current path.

A ``Route`` pairs a glob with an optional validator. The validator sees
the ``RouteInfo`` of a successful match and returns the value handed to
the route's content, or ``None`` to reject the match (e.g. a malformed
id that the glob alone cannot rule out).
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from wren.routing.matcher import PathMatcher
from wren.routing.route import RouteInfo

Validator = Callable[[RouteInfo], Any]


def _accept(info: RouteInfo) -> RouteInfo:
    return info


@dataclass(frozen=True, slots=True)
class Route:
    """A route definition. The default glob ``*`` matches every path.

    Usage::

        def user_id(info: RouteInfo) -> int | None:
            value = info.parameters["id"]
            return int(value) if value.isdigit() else None

        route = Route("/user/:id", validator=user_id)
        route.resolve("/user/42")    # 42
        route.resolve("/user/bob")   # None
    """

    glob: str = "*"
    validator: Validator = _accept
    matcher: PathMatcher = field(default_factory=PathMatcher, compare=False, repr=False)

    def match(self, path: str, relative: str = "/") -> RouteInfo | None:
        """Match the glob alone, without running the validator."""
        return self.matcher.match(self.glob, path, relative)

    def resolve(self, path: str, relative: str = "/") -> Any:
        """Return the validated value for *path*, or ``None`` if the route does not apply.

        Raises ``PatternCompileError`` if the glob is malformed.
        """
        info = self.match(path, relative)
        if info is None:
            return None
        return self.validator(info)


def first_match(
    routes: Iterable[Route],
    path: str,
    relative: str = "/",
) -> tuple[Route, Any] | None:
    """Return the first route that applies to *path* with its validated value.

    Routes after the first hit are not evaluated at all.
    """
    for route in routes:
        value = route.resolve(path, relative)
        if value is not None:
            return route, value
    return None
