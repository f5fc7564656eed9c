"""Routing context via ContextVar.

Provides:
- ``navigator_var``: The ``Navigator`` of the enclosing router.
- ``relative_path_var``: The base that relative globs and links resolve
  against. ``/`` at a router's root, the matched prefix inside a route.

A router sets both with ``router_scope``; a matched route narrows the
relative base with ``nested_scope``. Outside a router, ``get_navigator``
raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local otherwise.
    A nested router opens its own ``router_scope`` with its own
    navigator; the parent's navigator is restored when it exits.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from wren.navigation.navigator import Navigator
from wren.paths import normalize_path, resolve
from wren.routing.route import RouteInfo

# -- Router context --

navigator_var: ContextVar[Navigator] = ContextVar("wren_navigator")
"""The current router's navigator. Set by ``router_scope``."""

relative_path_var: ContextVar[str] = ContextVar("wren_relative_path", default="/")
"""The current relative base path."""


def get_navigator() -> Navigator:
    """Return the navigator of the enclosing router.

    Raises ``LookupError`` if called outside a router scope.
    """
    return navigator_var.get()


def get_relative_path() -> str:
    """Return the current relative base path (``/`` by default)."""
    return relative_path_var.get()


@contextmanager
def router_scope(navigator: Navigator, relative: str = "/") -> Iterator[Navigator]:
    """Make *navigator* the current router for the duration of the block.

    Usage::

        navigator = Navigator(initial_path="/news")
        with router_scope(navigator):
            render_app()
    """
    nav_token = navigator_var.set(navigator)
    rel_token = relative_path_var.set(normalize_path(relative))
    try:
        yield navigator
    finally:
        relative_path_var.reset(rel_token)
        navigator_var.reset(nav_token)


@contextmanager
def nested_scope(info: RouteInfo) -> Iterator[str]:
    """Descend into a matched route: relative paths resolve against its prefix."""
    token = relative_path_var.set(info.matched_path)
    try:
        yield info.matched_path
    finally:
        relative_path_var.reset(token)


def redirect(path: str, *, replace: bool = True) -> None:
    """Navigate the current router to *path*, relative to the current base.

    Replaces the current history entry by default, so the page that
    redirected is skipped when going back. Redirecting to the current
    path is ignored by ``Navigator.navigate``.
    """
    navigator = get_navigator()
    navigator.navigate(resolve(get_relative_path(), path), replace=replace)
