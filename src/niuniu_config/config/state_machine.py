"""Loader state machine implementation."""

from enum import Enum, auto
from typing import ClassVar


class LoaderState(Enum):
    """Configuration loader states.

    State transitions:
        UNLOADED -> LOCATING: Start searching the config directories
        LOCATING -> PARSED: Config file found and parsed as YAML
        PARSED -> READY: Environment overlaid and record decoded
        Any -> FAILED: Error occurred at any stage
    """

    UNLOADED = auto()
    LOCATING = auto()
    PARSED = auto()
    READY = auto()
    FAILED = auto()


class LoaderStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: LoaderState, to_state: LoaderState) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid loader state transition: {from_state.name} -> {to_state.name}"
        )


class LoaderStateMachine:
    """Enforces the one-way progression of a single load."""

    VALID_TRANSITIONS: ClassVar[dict[LoaderState, set[LoaderState]]] = {
        LoaderState.UNLOADED: {LoaderState.LOCATING, LoaderState.FAILED},
        LoaderState.LOCATING: {LoaderState.PARSED, LoaderState.FAILED},
        LoaderState.PARSED: {LoaderState.READY, LoaderState.FAILED},
        LoaderState.READY: set(),
        LoaderState.FAILED: set(),
    }

    def __init__(self) -> None:
        self._state = LoaderState.UNLOADED

    @property
    def state(self) -> LoaderState:
        """Get the current state."""
        return self._state

    def can_transition(self, to_state: LoaderState) -> bool:
        """Check if a transition to the given state is valid."""
        return to_state in self.VALID_TRANSITIONS.get(self._state, set())

    def transition(self, to_state: LoaderState) -> None:
        """Transition to a new state.

        Args:
            to_state: The target state.

        Raises:
            LoaderStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise LoaderStateError(self._state, to_state)
        self._state = to_state

    def is_terminal(self) -> bool:
        """Check if no more transitions are allowed."""
        return self._state in (LoaderState.READY, LoaderState.FAILED)

    def is_ready(self) -> bool:
        """Check if the record has been decoded."""
        return self._state == LoaderState.READY

    def is_failed(self) -> bool:
        """Check if loading has failed."""
        return self._state == LoaderState.FAILED
