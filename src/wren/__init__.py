"""Wren — a headless routing core.

Matches route globs against paths and keeps a branching back/forward
navigation history. Rendering is left to the caller.

Basic usage::

    from wren import Navigator, PathMatcher

    navigator = Navigator()
    navigator.navigate("/user/5/settings")

    info = PathMatcher().match("/user/:id/*", navigator.path)
    info.parameters["id"]   # "5"
    info.matched_path       # "/user/5"
"""

__version__ = "0.1.0"
__all__ = [
    "Action",
    "CompiledGlob",
    "ConfigurationError",
    "Direction",
    "NavigationAction",
    "Navigator",
    "PathMatcher",
    "PatternCompileError",
    "Route",
    "RouteInfo",
    "RouteParameters",
    "RouterConfig",
    "WrenError",
    "classify_direction",
    "first_match",
    "get_navigator",
    "normalize_path",
    "parse_glob",
    "redirect",
    "resolve",
    "router_scope",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Action": "wren.navigation.action",
    "CompiledGlob": "wren.routing.glob",
    "ConfigurationError": "wren.errors",
    "Direction": "wren.navigation.action",
    "NavigationAction": "wren.navigation.action",
    "Navigator": "wren.navigation.navigator",
    "PathMatcher": "wren.routing.matcher",
    "PatternCompileError": "wren.errors",
    "Route": "wren.routing.guard",
    "RouteInfo": "wren.routing.route",
    "RouteParameters": "wren.routing.route",
    "RouterConfig": "wren.config",
    "WrenError": "wren.errors",
    "classify_direction": "wren.navigation.action",
    "first_match": "wren.routing.guard",
    "get_navigator": "wren.context",
    "normalize_path": "wren.paths",
    "parse_glob": "wren.routing.glob",
    "redirect": "wren.context",
    "resolve": "wren.paths",
    "router_scope": "wren.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
