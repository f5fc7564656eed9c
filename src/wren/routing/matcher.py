"""PathMatcher — a glob matcher with a single-slot compile cache.

A matcher is meant to live at one call site (one route guard), where the
glob is almost always the same string on every render pass. It keeps the
last compiled glob and only recompiles when the string changes.
"""

import logging

from wren.paths import resolve
from wren.routing.glob import CompiledGlob, parse_glob
from wren.routing.route import RouteInfo

logger = logging.getLogger("wren.routing")


class PathMatcher:
    """Compile route globs lazily and match them against paths.

    Usage::

        matcher = PathMatcher()
        info = matcher.match("/user/:id/*", "/user/5/settings")
        info.parameters["id"]  # "5"

        # Relative globs resolve against the enclosing route's base
        matcher.match("article/:id", "/news/article/3", relative="/news")
    """

    __slots__ = ("_cached",)

    def __init__(self) -> None:
        self._cached: CompiledGlob | None = None

    @property
    def cached(self) -> CompiledGlob | None:
        """The last compiled glob, if any."""
        return self._cached

    def compile(self, glob: str) -> CompiledGlob:
        """Return the compiled form of *glob*, reusing the cached one if equal.

        A different glob replaces the cache slot. Raises
        ``PatternCompileError`` for an invalid parameter name, in which case
        the previous cache entry is kept.
        """
        cached = self._cached
        if cached is not None and cached.glob == glob:
            return cached

        compiled = parse_glob(glob)
        if cached is not None:
            logger.debug("Recompiling route glob %r (was %r)", glob, cached.glob)
        self._cached = compiled
        return compiled

    def match(self, glob: str, path: str, relative: str = "/") -> RouteInfo | None:
        """Resolve *glob* against *relative*, then match it against *path*.

        Returns ``None`` when the path does not match. Compile errors
        propagate.
        """
        compiled = self.compile(resolve(relative, glob))
        return compiled.match(path)
