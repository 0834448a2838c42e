"""Start/stop state shared by gates, filters and appenders."""

from enum import Enum


class State(Enum):
    """Lifecycle states, in the order a component moves through them."""

    INITIALIZED = "initialized"
    STARTING = "starting"
    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"


class LifeCycle:
    """Minimal lifecycle holder.

    Subclasses that own resources override ``start``/``stop`` and call
    ``super()`` so the state transitions stay consistent.
    """

    def __init__(self) -> None:
        self._state = State.INITIALIZED

    @property
    def state(self) -> State:
        return self._state

    def start(self) -> None:
        self._state = State.STARTING
        self._state = State.STARTED

    def stop(self) -> None:
        self._state = State.STOPPING
        self._state = State.STOPPED

    def is_started(self) -> bool:
        return self._state is State.STARTED

    def is_stopped(self) -> bool:
        return self._state is State.STOPPED
