"""NavigationAction and direction classification.

Every navigation is recorded as a ``NavigationAction`` carrying the kind
of navigation and how the new path relates to the previous one in the
path hierarchy. Transition layers use the direction to pick an animation.
"""

from dataclasses import dataclass
from enum import Enum

from wren.paths import split_path


class Action(Enum):
    """The kind of navigation that occurred."""

    PUSH = "push"
    BACK = "back"
    FORWARD = "forward"


class Direction(Enum):
    """Where the new path sits relative to the previous one."""

    DEEPER = "deeper"
    SIDEWAYS = "sideways"
    HIGHER = "higher"


def classify_direction(previous_path: str, current_path: str) -> Direction:
    """Classify a move from *previous_path* to *current_path*.

    - ``DEEPER``: the new path extends the previous one (anything below the root is deeper)
    - ``SIDEWAYS``: same depth and same parent
    - ``HIGHER``: up the hierarchy, or an unrelated path

    Examples::

        >>> classify_direction("/", "/hello")
        <Direction.DEEPER: 'deeper'>
        >>> classify_direction("/movies/actors", "/movies/genres")
        <Direction.SIDEWAYS: 'sideways'>
        >>> classify_direction("/movies/genres", "/news/latest")
        <Direction.HIGHER: 'higher'>
    """
    if len(current_path) > len(previous_path) and (
        current_path.startswith(previous_path + "/") or previous_path == "/"
    ):
        return Direction.DEEPER

    current = split_path(current_path)
    previous = split_path(previous_path)
    if len(current) == len(previous) and current[:-1] == previous[:-1]:
        return Direction.SIDEWAYS
    return Direction.HIGHER


@dataclass(frozen=True, slots=True)
class NavigationAction:
    """A single recorded navigation. Compared by value."""

    action: Action
    previous_path: str
    current_path: str
    direction: Direction

    @classmethod
    def between(cls, previous_path: str, current_path: str, action: Action) -> "NavigationAction":
        """Record *action* from *previous_path* to *current_path*, classifying its direction."""
        return cls(
            action=action,
            previous_path=previous_path,
            current_path=current_path,
            direction=classify_direction(previous_path, current_path),
        )
