"""Wren exception hierarchy.

Shared across the matcher, navigator and configuration so every module
raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when router configuration is invalid.

    Raised eagerly when a ``RouterConfig`` is constructed.
    """


class PatternCompileError(WrenError):
    """A route glob declares an invalid parameter.

    Parameter names must start with an ASCII letter, contain only ASCII
    letters and digits, and be unique within the glob. Route tables are
    static, so callers should treat this as a fatal mistake in the route
    definition rather than a path that merely fails to match.

    ``culprit`` is the first offending character, or empty for an empty
    or repeated name.
    """

    def __init__(self, glob: str, parameter: str, culprit: str = "") -> None:
        self.glob = glob
        self.parameter = parameter
        self.culprit = culprit
        super().__init__(glob, parameter, culprit)

    def __str__(self) -> str:
        if not self.parameter:
            return f"Empty parameter name in route glob {self.glob!r}"
        if not self.culprit:
            return f"Duplicate parameter name {self.parameter!r} in route glob {self.glob!r}"
        return (
            f"Bad parameter name {self.parameter!r} in route glob {self.glob!r}: "
            f"unexpected character {self.culprit!r}"
        )
