"""Route glob compilation and segment-based matching.

A glob is split once into literal segments, parameter segments and a
trailing wildcard flag. Matching walks the path segments in a single
pass, so a compiled glob yields at most one result per path.
"""

import re
from dataclasses import dataclass

from wren.errors import PatternCompileError
from wren.routing.route import GlobSegment, RouteInfo, RouteParameters

# First character that is not a letter, or any later non-alphanumeric
_BAD_NAME_CHAR = re.compile(r"^[^A-Za-z]|[^A-Za-z0-9]")


def _check_param_name(glob: str, name: str) -> None:
    if not name:
        raise PatternCompileError(glob=glob, parameter=name)
    bad = _BAD_NAME_CHAR.search(name)
    if bad is not None:
        raise PatternCompileError(glob=glob, parameter=name, culprit=bad.group())


def parse_glob(glob: str) -> "CompiledGlob":
    """Compile a route glob into a ``CompiledGlob``.

    Examples::

        "/"              -> no segments, matches only the root
        "/users/*"       -> [GlobSegment("users")], wildcard
        "/user/:id"      -> [GlobSegment("user"), GlobSegment(":id", is_param=True, ...)]
        "/user/:group?"  -> [..., GlobSegment(":group?", is_param=True, optional=True)]

    Raises ``PatternCompileError`` if a parameter name is invalid or repeated.
    """
    body = glob
    wildcard = body.endswith("*")
    if wildcard:
        body = body[:-1]

    segments: list[GlobSegment] = []
    seen: set[str] = set()
    for part in body.split("/"):
        if not part:
            continue
        if part.startswith(":"):
            name = part[1:]
            optional = name.endswith("?")
            if optional:
                name = name[:-1]
            _check_param_name(glob, name)
            if name in seen:
                raise PatternCompileError(glob=glob, parameter=name)
            seen.add(name)
            segments.append(
                GlobSegment(
                    value=part,
                    is_param=True,
                    param_name=name,
                    optional=optional,
                )
            )
        else:
            segments.append(GlobSegment(value=part))

    return CompiledGlob(glob=glob, segments=tuple(segments), wildcard=wildcard)


def _path_parts(path: str) -> list[str]:
    body = path[1:] if path.startswith("/") else path
    # A single trailing slash stands for an absent optional segment
    if body.endswith("/"):
        body = body[:-1]
    return body.split("/") if body else []


@dataclass(frozen=True, slots=True)
class CompiledGlob:
    """An immutable, compiled route glob.

    Usage::

        compiled = parse_glob("/user/:id/*")
        info = compiled.match("/user/5/settings")
        info.parameters["id"]   # "5"
        info.matched_path       # "/user/5"
    """

    glob: str
    segments: tuple[GlobSegment, ...]
    wildcard: bool = False

    @property
    def parameter_names(self) -> frozenset[str]:
        """Names of every parameter the glob declares."""
        return frozenset(seg.param_name for seg in self.segments if seg.param_name)

    def match(self, path: str) -> RouteInfo | None:
        """Match *path* against the glob.

        Returns a ``RouteInfo`` on success, ``None`` otherwise. Matching is
        case-sensitive and segment-based: ``/movie`` never matches ``/movies``.
        """
        parts = _path_parts(path)
        params: dict[str, str] = {}
        index = 0

        for seg in self.segments:
            if index == len(parts):
                # Path exhausted: only optional parameters may remain
                if seg.optional:
                    continue
                return None

            part = parts[index]
            if seg.is_param:
                if not part:
                    return None
                params[seg.param_name or ""] = part
            elif part != seg.value:
                return None
            index += 1

        if index < len(parts) and not self.wildcard:
            return None

        return RouteInfo(
            matched_path="/" + "/".join(parts[:index]),
            parameters=RouteParameters(params),
        )
