"""Tests for wren.navigation.navigator — history stacks and navigation."""

import logging

import pytest

from wren.config import RouterConfig
from wren.navigation.action import Action, Direction, NavigationAction
from wren.navigation.navigator import Navigator


def _walk() -> Navigator:
    """Navigator after: news, /settings/user, .., ../../../../.."""
    navigator = Navigator()
    navigator.navigate("news")
    navigator.navigate("/settings/user")
    navigator.navigate("..")
    navigator.navigate("../../../../..")
    return navigator


class TestInitialState:
    def test_defaults_to_root(self) -> None:
        navigator = Navigator()
        assert navigator.path == "/"
        assert navigator.history == ("/",)
        assert navigator.forward_history == ()
        assert navigator.last_action is None
        assert navigator.can_go_back is False
        assert navigator.can_go_forward is False

    def test_initial_path_normalized(self) -> None:
        navigator = Navigator("news//latest/")
        assert navigator.path == "/news/latest"
        assert navigator.initial_path == "/news/latest"

    def test_equality_is_identity(self) -> None:
        a = Navigator()
        b = a
        a.navigate("/foo")
        assert a == b
        assert Navigator() != Navigator()


class TestNavigate:
    def test_relative_absolute_and_parent(self) -> None:
        navigator = Navigator()

        navigator.navigate("news")
        assert navigator.path == "/news"

        navigator.navigate("/settings/user")
        assert navigator.path == "/settings/user"

        navigator.navigate("..")
        assert navigator.path == "/settings"

        navigator.navigate("../../../../..")
        assert navigator.path == "/"

    def test_push_grows_history(self) -> None:
        navigator = _walk()
        assert navigator.history == ("/", "/news", "/settings/user", "/settings", "/")

    def test_replace_overwrites_top(self) -> None:
        navigator = Navigator()
        navigator.navigate("/a")
        navigator.navigate("/b", replace=True)
        assert navigator.history == ("/", "/b")

    def test_replace_at_seed(self) -> None:
        navigator = Navigator()
        navigator.navigate("/login", replace=True)
        assert navigator.history == ("/login",)
        assert navigator.can_go_back is False

    def test_records_push_action(self) -> None:
        navigator = Navigator()
        navigator.navigate("/hello")
        assert navigator.last_action == NavigationAction(
            action=Action.PUSH,
            previous_path="/",
            current_path="/hello",
            direction=Direction.DEEPER,
        )

    def test_same_path_is_noop(self) -> None:
        navigator = Navigator()
        navigator.navigate("/a")
        action = navigator.last_action

        navigator.navigate("/a")
        navigator.navigate("./")
        assert navigator.history == ("/", "/a")
        assert navigator.last_action is action

    def test_same_path_warns_in_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        navigator = Navigator(config=RouterConfig(debug=True))
        with caplog.at_level(logging.WARNING, logger="wren.navigation"):
            navigator.navigate("/")
        assert "current path '/' ignored" in caplog.text

    def test_same_path_quiet_without_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        navigator = Navigator()
        with caplog.at_level(logging.WARNING, logger="wren.navigation"):
            navigator.navigate("/")
        assert caplog.records == []

    def test_new_path_discards_forward_branch(self) -> None:
        navigator = Navigator()
        navigator.navigate("/a")
        navigator.navigate("/b")
        navigator.go_back()
        assert navigator.can_go_forward is True

        navigator.navigate("/c")
        assert navigator.can_go_forward is False
        assert navigator.history == ("/", "/a", "/c")


class TestGoBack:
    def test_back_and_forward(self) -> None:
        navigator = _walk()

        navigator.go_back()
        assert navigator.path == "/settings"

        navigator.go_back(2)
        assert navigator.path == "/news"

        navigator.go_forward()
        assert navigator.path == "/settings/user"

    def test_noop_at_seed(self) -> None:
        navigator = Navigator()
        navigator.go_back()
        assert navigator.path == "/"
        assert navigator.last_action is None

    def test_clamped_to_seed(self) -> None:
        navigator = _walk()
        navigator.go_back(100)
        assert navigator.history == ("/",)
        assert navigator.forward_history == ("/", "/settings", "/settings/user", "/news")

    def test_non_positive_count_is_noop(self) -> None:
        navigator = _walk()
        navigator.go_back(0)
        navigator.go_back(-3)
        assert navigator.path == "/"
        assert len(navigator.history) == 5

    def test_records_back_action(self) -> None:
        navigator = Navigator()
        navigator.navigate("/movies/genres")
        navigator.go_back()
        action = navigator.last_action
        assert action is not None
        assert action.action is Action.BACK
        assert action.previous_path == "/movies/genres"
        assert action.current_path == "/"
        assert action.direction is Direction.HIGHER


class TestGoForward:
    def test_noop_without_forward(self) -> None:
        navigator = _walk()
        action = navigator.last_action
        navigator.go_forward()
        assert navigator.path == "/"
        assert navigator.last_action is action

    def test_clamped(self) -> None:
        navigator = _walk()
        navigator.go_back(2)
        navigator.go_forward(10)
        assert navigator.path == "/"
        assert navigator.can_go_forward is False

    def test_preserves_order(self) -> None:
        navigator = _walk()
        navigator.go_back(3)
        navigator.go_forward(2)
        assert navigator.history == ("/", "/news", "/settings/user", "/settings")
        assert navigator.forward_history == ("/",)

    def test_records_forward_action(self) -> None:
        navigator = Navigator()
        navigator.navigate("/movies")
        navigator.go_back()
        navigator.go_forward()
        action = navigator.last_action
        assert action is not None
        assert action.action is Action.FORWARD
        assert action.direction is Direction.DEEPER

    @pytest.mark.parametrize("count", [1, 2, 3, 4])
    def test_back_then_forward_round_trips(self, count: int) -> None:
        navigator = _walk()
        before = navigator.history

        navigator.go_back(count)
        navigator.go_forward(count)
        assert navigator.path == "/"
        assert navigator.history == before
        assert navigator.can_go_forward is False


class TestClear:
    def test_collapses_to_current(self) -> None:
        navigator = _walk()
        navigator.go_back()
        navigator.clear()
        assert navigator.history == ("/settings",)
        assert navigator.forward_history == ()
        assert navigator.last_action is None
        assert navigator.can_go_back is False

    def test_idempotent(self) -> None:
        navigator = _walk()
        navigator.clear()
        once = (navigator.history, navigator.forward_history, navigator.last_action)
        navigator.clear()
        assert (navigator.history, navigator.forward_history, navigator.last_action) == once


class TestMaxHistory:
    def test_oldest_dropped(self) -> None:
        navigator = Navigator(config=RouterConfig(max_history=3))
        for path in ("/a", "/b", "/c", "/d"):
            navigator.navigate(path)
        assert navigator.history == ("/b", "/c", "/d")
        assert navigator.path == "/d"

    def test_limit_of_one_keeps_current(self) -> None:
        navigator = Navigator(config=RouterConfig(max_history=1))
        navigator.navigate("/a")
        navigator.navigate("/b")
        assert navigator.history == ("/b",)
        assert navigator.can_go_back is False

    def test_round_trip_within_limit(self) -> None:
        navigator = Navigator(config=RouterConfig(max_history=2))
        navigator.navigate("/a")
        navigator.navigate("/b")
        navigator.go_back()
        navigator.go_forward()
        assert navigator.history == ("/a", "/b")


class TestIsActive:
    def test_prefix(self) -> None:
        navigator = Navigator("/news/latest")
        assert navigator.is_active("/news") is True
        assert navigator.is_active("/newsroom") is False
        assert navigator.is_active("/new") is False

    def test_exact(self) -> None:
        navigator = Navigator("/news/latest")
        assert navigator.is_active("/news", exact=True) is False
        assert navigator.is_active("/news/latest", exact=True) is True

    def test_relative(self) -> None:
        navigator = Navigator("/news/latest")
        assert navigator.is_active("latest", relative="/news", exact=True) is True


class TestSubscribe:
    def test_listener_receives_actions(self) -> None:
        navigator = Navigator()
        seen: list[NavigationAction | None] = []
        navigator.subscribe(seen.append)

        navigator.navigate("/a")
        navigator.go_back()
        navigator.go_forward()
        navigator.clear()

        assert [a.action if a else None for a in seen] == [Action.PUSH, Action.BACK, Action.FORWARD, None]

    def test_noops_do_not_notify(self) -> None:
        navigator = Navigator()
        seen: list[NavigationAction | None] = []
        navigator.subscribe(seen.append)

        navigator.navigate("/")
        navigator.go_back()
        navigator.go_forward()
        assert seen == []

    def test_unsubscribe(self) -> None:
        navigator = Navigator()
        seen: list[NavigationAction | None] = []
        unsubscribe = navigator.subscribe(seen.append)

        navigator.navigate("/a")
        unsubscribe()
        unsubscribe()
        navigator.navigate("/b")
        assert len(seen) == 1

    def test_state_updated_before_notify(self) -> None:
        navigator = Navigator()
        paths: list[str] = []
        navigator.subscribe(lambda _action: paths.append(navigator.path))

        navigator.navigate("/a")
        assert paths == ["/a"]

    def test_listener_errors_propagate(self) -> None:
        navigator = Navigator()

        def boom(_action: NavigationAction | None) -> None:
            raise RuntimeError("listener failed")

        navigator.subscribe(boom)
        with pytest.raises(RuntimeError, match="listener failed"):
            navigator.navigate("/a")
        assert navigator.path == "/a"
