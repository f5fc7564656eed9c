"""GlobSegment, RouteParameters and RouteInfo value types."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GlobSegment:
    """A parsed segment of a route glob.

    Literal:   ``/users``  (is_param=False)
    Param:     ``/:id``    (is_param=True, param_name="id")
    Optional:  ``/:id?``   (is_param=True, param_name="id", optional=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    optional: bool = False


class RouteParameters(Mapping[str, str]):
    """Immutable mapping of parameter name to the path segment it captured.

    Only parameters present in the path are stored. An optional parameter
    that was absent is missing from the mapping, never an empty string.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"RouteParameters({self._values!r})"


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """Result of a successful glob match.

    ``matched_path`` is the prefix of the path consumed by the glob's
    literal and parameter segments. It never includes a wildcard
    remainder, which makes it the relative base for nested routes::

        /news/*  ~  /news/article/1   ->  matched_path "/news"
    """

    matched_path: str
    parameters: RouteParameters = field(default_factory=RouteParameters)
