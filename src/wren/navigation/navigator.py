"""Navigator — branching back/forward navigation history.

One ``Navigator`` is created per routing root and shared by reference
with everything below it (see ``wren.context``). It is mutated only
through ``navigate``, ``go_back``, ``go_forward`` and ``clear``; every
mutation is recorded as a ``NavigationAction`` and announced to
subscribers.

Thread safety:
    A navigator is owned by a single thread or event loop. Callers that
    share one across threads must hold their own lock around it.
"""

import logging
from collections.abc import Callable

from wren.config import RouterConfig
from wren.navigation.action import Action, NavigationAction
from wren.paths import normalize_path, resolve, split_path

logger = logging.getLogger("wren.navigation")

Listener = Callable[[NavigationAction | None], object]


class Navigator:
    """The state of a router: current path, history and forward stack.

    Usage::

        navigator = Navigator()
        navigator.navigate("news")            # relative  -> /news
        navigator.navigate("/settings/user")  # absolute  -> /settings/user
        navigator.navigate("..")              # up one    -> /settings
        navigator.go_back()                   # -> /settings/user
        navigator.go_forward()                # -> /settings

    Navigators compare by identity; two routers never share state.
    """

    __slots__ = ("_config", "_forward_stack", "_history_stack", "_initial_path", "_last_action", "_listeners")

    def __init__(self, initial_path: str = "/", *, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._initial_path = normalize_path(initial_path)
        self._history_stack: list[str] = [self._initial_path]
        # Next path to go forward to is last
        self._forward_stack: list[str] = []
        self._last_action: NavigationAction | None = None
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        back = len(self._history_stack) - 1
        return f"<Navigator path={self.path!r} back={back} forward={len(self._forward_stack)}>"

    # -- Read-only state --

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def initial_path(self) -> str:
        return self._initial_path

    @property
    def path(self) -> str:
        """The current path. Always the top of the history stack."""
        return self._history_stack[-1]

    @property
    def can_go_back(self) -> bool:
        return len(self._history_stack) > 1

    @property
    def can_go_forward(self) -> bool:
        return bool(self._forward_stack)

    @property
    def last_action(self) -> NavigationAction | None:
        """The most recent navigation, or ``None`` before any (and after ``clear``)."""
        return self._last_action

    @property
    def history(self) -> tuple[str, ...]:
        """Visited paths, oldest first. The last entry is the current path."""
        return tuple(self._history_stack)

    @property
    def forward_history(self) -> tuple[str, ...]:
        """Paths available to ``go_forward``, the next one last."""
        return tuple(self._forward_stack)

    # -- Navigation --

    def navigate(self, path: str, replace: bool = False) -> None:
        """Navigate to *path*, resolved against the current path.

        ``/`` makes the path absolute and ``..`` goes up a level::

            navigator.navigate("news")            # relative
            navigator.navigate("/settings/user")  # absolute
            navigator.navigate("..")              # up one

        Navigating to the current path is ignored. With ``replace=True``
        the current history entry is overwritten instead of pushed.
        Any forward history is discarded.
        """
        previous_path = self.path
        new_path = resolve(previous_path, path)

        if new_path == previous_path:
            level = logging.WARNING if self._config.debug else logging.DEBUG
            logger.log(level, "Navigating to the current path %r ignored", new_path)
            return

        self._forward_stack.clear()
        if replace:
            self._history_stack[-1] = new_path
        else:
            self._history_stack.append(new_path)
            self._trim_history()

        self._record(NavigationAction.between(previous_path, new_path, Action.PUSH))

    def go_back(self, count: int = 1) -> None:
        """Go back *count* steps, clamped so the oldest entry always remains."""
        total = min(count, len(self._history_stack) - 1)
        if total < 1:
            return

        previous_path = self.path
        for _ in range(total):
            self._forward_stack.append(self._history_stack.pop())

        self._record(NavigationAction.between(previous_path, self.path, Action.BACK))

    def go_forward(self, count: int = 1) -> None:
        """Go forward *count* steps, clamped to the forward history."""
        total = min(count, len(self._forward_stack))
        if total < 1:
            return

        previous_path = self.path
        for _ in range(total):
            self._history_stack.append(self._forward_stack.pop())
        self._trim_history()

        self._record(NavigationAction.between(previous_path, self.path, Action.FORWARD))

    def clear(self) -> None:
        """Forget all history except the current path."""
        self._forward_stack.clear()
        del self._history_stack[:-1]
        self._last_action = None
        self._notify(None)

    def is_active(self, target: str, *, relative: str = "/", exact: bool = False) -> bool:
        """Whether a link to *target* points at the current path.

        With ``exact=False`` a link is also active when the current path
        lies below it: a link to ``/news`` is active on ``/news/latest``
        but not on ``/newsroom``.
        """
        absolute = resolve(relative, target)
        if exact:
            return self.path == absolute
        target_parts = split_path(absolute)
        return split_path(self.path)[: len(target_parts)] == target_parts

    # -- Change notification --

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every change. Returns an unsubscribe function.

        The listener receives the new ``last_action`` (``None`` after
        ``clear``). Exceptions raised by a listener propagate to whoever
        triggered the navigation.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _record(self, action: NavigationAction) -> None:
        self._last_action = action
        self._notify(action)

    def _notify(self, action: NavigationAction | None) -> None:
        for listener in tuple(self._listeners):
            listener(action)

    def _trim_history(self) -> None:
        limit = self._config.max_history
        if limit is None or len(self._history_stack) <= limit:
            return
        dropped = len(self._history_stack) - limit
        del self._history_stack[:dropped]
        logger.debug("History limit %d reached, dropped %d oldest entries", limit, dropped)
