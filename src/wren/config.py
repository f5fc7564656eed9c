"""Router configuration.

RouterConfig is a frozen dataclass: fixed for the lifetime of a Navigator and
validated when constructed.
"""

from dataclasses import dataclass

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, max_history=50)
    """

    # Diagnostics (surface ignored same-path navigations as warnings)
    debug: bool = False

    # History bound (None = unbounded); the current path is never dropped
    max_history: int | None = None

    def __post_init__(self) -> None:
        if self.max_history is not None and self.max_history < 1:
            msg = f"max_history must be at least 1, got {self.max_history}"
            raise ConfigurationError(msg)
