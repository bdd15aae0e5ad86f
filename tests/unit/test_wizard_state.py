"""
Unit tests for the wizard state machine.
"""

import random
from collections import Counter
from functools import reduce

import pytest

from wacc_extras.features import FeatureKind
from wacc_extras.wizard import (
    FlowVariant,
    Screen,
    SpawnRunner,
    Terminate,
    WizardState,
    WriteSettings,
    initial_state,
    transition,
)
from wacc_extras.wizard.state import NO, YES, toggle


def press(state: WizardState, *keys: str) -> tuple[WizardState, list]:
    """Feed keys through the state machine, collecting effects."""
    effects = []
    for key in keys:
        state, effect = transition(state, key)
        if effect is not None:
            effects.append(effect)
    return state, effects


# =============================================================================
# Feature screen
# =============================================================================


class TestChooseFeatures:
    """Tests for the feature selection screen."""

    def test_initial_state(self):
        state = initial_state()
        assert state.screen == Screen.CHOOSE_FEATURES
        assert state.cursor == 0
        assert state.selection == frozenset()
        assert state.variant == FlowVariant.RUN

    @pytest.mark.parametrize("key", ["down", "j"])
    def test_move_down(self, key):
        state, effects = press(initial_state(), key)
        assert state.cursor == 1
        assert effects == []

    @pytest.mark.parametrize("key", ["up", "k"])
    def test_move_up(self, key):
        state, _ = press(initial_state(), "down", "down", key)
        assert state.cursor == 1

    def test_up_stops_at_top(self):
        state, _ = press(initial_state(), "up", "k")
        assert state.cursor == 0

    def test_down_rests_one_past_last_row(self):
        state, _ = press(initial_state(), *["down"] * 10)
        assert state.cursor == 4

    def test_toggle(self):
        state, _ = press(initial_state(), "down", "space")
        assert state.selection == {1}

    def test_double_toggle_restores(self):
        state, _ = press(initial_state(), "space", "space")
        assert state.selection == frozenset()

    def test_toggle_on_resting_slot_is_noop(self):
        state, _ = press(initial_state(), *["down"] * 4, "space")
        assert state.cursor == 4
        assert state.selection == frozenset()

    def test_confirm_moves_to_save_dialog(self):
        state, effects = press(initial_state(), "down", "down", "space", "enter")
        assert state.screen == Screen.CONFIRM_SAVE
        assert state.cursor == YES
        assert state.selection == {2}
        assert effects == []

    @pytest.mark.parametrize("key", ["q", "ctrl+c"])
    def test_quit(self, key):
        state, effect = transition(initial_state(), key)
        assert effect == Terminate()
        assert state == initial_state()

    @pytest.mark.parametrize("key", ["left", "right", "h", "l", "x", "tab", "escape"])
    def test_unrecognized_keys_ignored(self, key):
        start, _ = press(initial_state(), "down", "space")
        state, effect = transition(start, key)
        assert state == start
        assert effect is None

    def test_transition_does_not_mutate(self):
        start = initial_state()
        transition(start, "space")
        assert start.selection == frozenset()


# =============================================================================
# Save dialog
# =============================================================================


class TestConfirmSave:
    """Tests for the save dialog."""

    @pytest.fixture
    def dialog(self) -> WizardState:
        state, _ = press(initial_state(), "space", "down", "down", "down", "space", "enter")
        return state

    @pytest.mark.parametrize("key", ["right", "l"])
    def test_move_right(self, dialog, key):
        state, _ = press(dialog, key)
        assert state.cursor == NO

    @pytest.mark.parametrize("key", ["left", "h"])
    def test_move_left(self, dialog, key):
        state, _ = press(dialog, "right", key)
        assert state.cursor == YES

    def test_cursor_stays_binary(self, dialog):
        state, _ = press(dialog, "left", "left")
        assert state.cursor == YES
        state, _ = press(state, "right", "right", "l")
        assert state.cursor == NO

    def test_confirm_yes_writes_selected_kinds(self, dialog):
        state, effects = press(dialog, "enter")
        assert state.screen == Screen.CONFIRM_RUN
        assert effects == [WriteSettings((FeatureKind.BITWISE, FeatureKind.GOTO))]

    def test_confirm_no_skips_writing(self, dialog):
        state, effects = press(dialog, "right", "enter")
        assert state.screen == Screen.CONFIRM_RUN
        assert effects == []

    def test_navigation_keys_of_feature_screen_ignored(self, dialog):
        state, effects = press(dialog, "up", "down", "space")
        assert state == dialog
        assert effects == []

    @pytest.mark.parametrize("key", ["q", "ctrl+c"])
    def test_quit(self, dialog, key):
        _, effect = transition(dialog, key)
        assert effect == Terminate()

    def test_save_only_variant_finishes(self):
        state, effects = press(initial_state(FlowVariant.SAVE_ONLY), "space", "enter", "enter")
        assert state.screen == Screen.DONE
        assert effects == [WriteSettings((FeatureKind.BITWISE,))]

    def test_save_only_variant_declined(self):
        state, effects = press(initial_state(FlowVariant.SAVE_ONLY), "enter", "right", "enter")
        assert state.screen == Screen.DONE
        assert effects == []


# =============================================================================
# Run dialog and finish
# =============================================================================


class TestConfirmRun:
    """Tests for the run dialog and the finished state."""

    def test_confirm_spawns_runner_with_flags(self):
        state, effects = press(
            initial_state(),
            "space", "space", "down", "down", "down", "space", "enter",
            "right", "enter", "enter",
        )
        assert state.screen == Screen.DONE
        assert effects == [SpawnRunner(("--goto",))]

    def test_confirm_with_no_selection(self):
        _, effects = press(initial_state(), "enter", "right", "enter", "enter")
        assert effects == [SpawnRunner(())]

    @pytest.mark.parametrize("key", ["q", "ctrl+c"])
    def test_quit(self, key):
        state, _ = press(initial_state(), "enter", "right", "enter")
        _, effect = transition(state, key)
        assert effect == Terminate()

    def test_other_keys_ignored(self):
        start, _ = press(initial_state(), "enter", "right", "enter")
        state, effects = press(start, "space", "left", "down")
        assert state == start
        assert effects == []

    @pytest.mark.parametrize("key", ["enter", "a", "q"])
    def test_done_terminates_on_any_key(self, key):
        _, effect = transition(WizardState(screen=Screen.DONE), key)
        assert effect == Terminate()


# =============================================================================
# Scenarios and properties
# =============================================================================


class TestScenarios:
    """End-to-end key sequences."""

    def test_single_feature_saved(self):
        state, effects = press(initial_state(), "down", "down", "space", "enter", "enter")
        # cursor starts on Bitwise, so two steps down is Increment
        assert state.selection == {2}
        assert effects == [WriteSettings((FeatureKind.INCREMENT,))]

    def test_compound_saved(self):
        state, effects = press(initial_state(), "down", "space", "enter", "enter")
        assert state.selection == {1}
        assert effects == [WriteSettings((FeatureKind.COMPOUND,))]

    def test_bitwise_and_goto_run(self):
        state, effects = press(
            initial_state(),
            "space", "space", "space", "down", "down", "down", "space", "enter",
            "enter", "enter",
        )
        assert state.selection == {0, 3}
        assert effects == [
            WriteSettings((FeatureKind.BITWISE, FeatureKind.GOTO)),
            SpawnRunner(("--bitwise", "--goto")),
        ]


class TestProperties:
    """Randomized checks of the state machine invariants."""

    def test_selection_matches_odd_toggle_counts(self):
        rng = random.Random(1234)
        for _ in range(200):
            indices = [rng.randrange(4) for _ in range(rng.randrange(12))]
            selection = reduce(toggle, indices, frozenset())
            counts = Counter(indices)
            assert selection == {i for i, n in counts.items() if n % 2 == 1}

    def test_feature_cursor_in_bounds(self):
        rng = random.Random(99)
        state = initial_state()
        for _ in range(500):
            state, _ = transition(state, rng.choice(["up", "down", "k", "j", "space"]))
            assert 0 <= state.cursor <= 4

    def test_save_cursor_binary(self):
        rng = random.Random(7)
        state, _ = press(initial_state(), "enter")
        for _ in range(200):
            state, _ = transition(state, rng.choice(["left", "right", "h", "l"]))
            assert state.cursor in (YES, NO)

    def test_written_kinds_match_selection(self):
        rng = random.Random(42)
        for _ in range(50):
            keys = [rng.choice(["up", "down", "space"]) for _ in range(rng.randrange(20))]
            state, _ = press(initial_state(), *keys)
            selection = state.selection
            _, effects = press(state, "enter", "enter")
            expected = tuple(
                kind for i, kind in enumerate(FeatureKind) if i in selection
            )
            assert effects == [WriteSettings(expected)]
