"""Unit tests for StateMachine."""

import pytest

from vidshelf.core.state_machine import (
    InvalidTransitionError,
    StateMachine,
    create_loader_state_machine,
    get_loader_transitions,
)
from vidshelf.models.video import LoaderState


class TestStateMachine:
    """Tests for generic StateMachine."""

    @pytest.fixture
    def simple_transitions(self):
        """Create simple transition map for testing."""
        return {
            "start": ["middle", "end"],
            "middle": ["end"],
            "end": [],
        }

    @pytest.fixture
    def state_machine(self, simple_transitions):
        """Create state machine with simple transitions."""
        return StateMachine("start", simple_transitions)

    def test_initial_state(self, state_machine):
        """Test that initial state is set correctly."""
        assert state_machine.current == "start"

    def test_can_transition(self, state_machine):
        """Test can_transition for valid and invalid targets."""
        assert state_machine.can_transition("middle") is True
        assert state_machine.can_transition("nonexistent") is False

    def test_transition_invalid_raises(self, state_machine):
        """Test invalid transition raises error."""
        state_machine.transition("middle")

        with pytest.raises(InvalidTransitionError) as exc_info:
            state_machine.transition("start")

        assert exc_info.value.current == "middle"
        assert exc_info.value.target == "start"
        assert "end" in exc_info.value.allowed

    def test_reset_bypasses_validation(self, state_machine):
        """Test reset allows setting any state."""
        state_machine.transition("end")
        state_machine.reset("start")
        assert state_machine.current == "start"


class TestLoaderStateMachine:
    """Tests for the gallery loader transition map."""

    def test_starts_idle(self):
        """Test default initial state."""
        assert create_loader_state_machine().current == LoaderState.IDLE

    def test_retry_cycle(self):
        """Test loading -> retrying -> loading -> failed -> loading."""
        sm = create_loader_state_machine()
        sm.transition(LoaderState.LOADING)
        sm.transition(LoaderState.RETRYING)
        sm.transition(LoaderState.LOADING)
        sm.transition(LoaderState.FAILED)
        sm.transition(LoaderState.LOADING)
        assert sm.current == LoaderState.LOADING

    def test_loading_cannot_reenter_loading(self):
        """Test a second concurrent load is not a legal transition."""
        sm = create_loader_state_machine()
        sm.transition(LoaderState.LOADING)
        with pytest.raises(InvalidTransitionError):
            sm.transition(LoaderState.LOADING)

    def test_idle_cannot_render(self):
        """Test rendering requires a load first."""
        sm = create_loader_state_machine()
        assert sm.can_transition(LoaderState.RENDERED) is False

    def test_every_state_has_entry(self):
        """Test the transition map covers every LoaderState."""
        assert set(get_loader_transitions()) == set(LoaderState)
