"""Generic State Machine for status transitions.

This module provides a reusable state machine pattern for managing
status transitions. The gallery loader uses it to track its fetch cycle.

Example:
    LOADER_TRANSITIONS: TransitionMap[LoaderState] = {
        LoaderState.IDLE: [LoaderState.LOADING],
        LoaderState.LOADING: [LoaderState.RENDERED, LoaderState.RETRYING, LoaderState.FAILED],
        ...
    }

    sm = StateMachine(LoaderState.IDLE, LOADER_TRANSITIONS)

    if sm.can_transition(LoaderState.LOADING):
        sm.transition(LoaderState.LOADING)
"""

from enum import Enum
from typing import Generic, TypeVar

from vidshelf.core.exceptions import VidShelfError

T = TypeVar("T", bound=str | Enum)

# Type alias for transition maps
TransitionMap = dict[T, list[T]]


class InvalidTransitionError(VidShelfError):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, current: T, target: T, allowed: list[T] | None = None):
        self.current = current
        self.target = target
        self.allowed = allowed or []
        allowed_str = ", ".join(str(s) for s in self.allowed) if self.allowed else "none"
        super().__init__(
            message=f"Invalid transition from '{current}' to '{target}'. "
            f"Allowed transitions: {allowed_str}",
            context={
                "current": str(current),
                "target": str(target),
                "allowed": [str(s) for s in self.allowed],
            },
        )


class StateMachine(Generic[T]):
    """Generic state machine for status transitions.

    Attributes:
        current: Current state
        transitions: Map of allowed transitions from each state
    """

    def __init__(self, initial: T, transitions: TransitionMap[T]):
        """Initialize state machine.

        Args:
            initial: Initial state
            transitions: Map of state -> list of allowed target states
        """
        self._current = initial
        self._transitions = transitions

    @property
    def current(self) -> T:
        """Get current state."""
        return self._current

    @property
    def allowed_transitions(self) -> list[T]:
        """Get list of states we can transition to from current state."""
        return self._transitions.get(self._current, [])

    def can_transition(self, target: T) -> bool:
        """Check if transition to target state is allowed.

        Args:
            target: Target state to check

        Returns:
            True if transition is allowed, False otherwise
        """
        return target in self.allowed_transitions

    def transition(self, target: T) -> None:
        """Perform transition to target state.

        Args:
            target: Target state

        Raises:
            InvalidTransitionError: If transition is not allowed
        """
        if not self.can_transition(target):
            raise InvalidTransitionError(
                current=self._current,
                target=target,
                allowed=self.allowed_transitions,
            )
        self._current = target

    def reset(self, state: T) -> None:
        """Reset state machine to a specific state (bypass transition rules).

        Args:
            state: State to reset to
        """
        self._current = state


# ============================================
# Predefined Transition Maps
# ============================================


def get_loader_transitions() -> TransitionMap:
    """Get transition map for LoaderState."""
    from vidshelf.models.video import LoaderState

    return {
        LoaderState.IDLE: [LoaderState.LOADING],
        LoaderState.LOADING: [LoaderState.RENDERED, LoaderState.RETRYING, LoaderState.FAILED],
        LoaderState.RETRYING: [LoaderState.LOADING],
        LoaderState.RENDERED: [LoaderState.LOADING],  # Explicit reload
        LoaderState.FAILED: [LoaderState.LOADING],  # Manual "Try Again"
    }


def create_loader_state_machine() -> StateMachine:
    """Create a state machine for the gallery loader, starting at IDLE."""
    from vidshelf.models.video import LoaderState

    return StateMachine(LoaderState.IDLE, get_loader_transitions())
