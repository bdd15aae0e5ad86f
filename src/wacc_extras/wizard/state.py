"""
Wizard state machine.

Transitions are pure: ``transition`` takes the current state and a key name
and returns the next state together with at most one effect for the session
to carry out. Nothing here touches the file system or spawns processes.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto

from wacc_extras.features import FeatureKind, all_features, flags_for, kinds_for

logger = logging.getLogger(__name__)


class Screen(Enum):
    """Wizard screens, in flow order."""

    CHOOSE_FEATURES = auto()
    CONFIRM_SAVE = auto()
    CONFIRM_RUN = auto()
    DONE = auto()


class FlowVariant(str, Enum):
    """Which flow the wizard follows after the save dialog."""

    RUN = "run"  # ask to run the test runner
    SAVE_ONLY = "save_only"  # stop after the save dialog


# Save dialog choices
YES = 0
NO = 1

QUIT_KEYS = frozenset({"q", "ctrl+c"})
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
LEFT_KEYS = frozenset({"left", "h"})
RIGHT_KEYS = frozenset({"right", "l"})
TOGGLE_KEY = "space"
CONFIRM_KEY = "enter"


@dataclass(frozen=True)
class WriteSettings:
    """Persist the selected kinds to the settings file."""

    kinds: tuple[FeatureKind, ...]


@dataclass(frozen=True)
class SpawnRunner:
    """Launch the test runner with these flags."""

    flags: tuple[str, ...]


@dataclass(frozen=True)
class Terminate:
    """End the session without further side effects."""

    pass


Effect = WriteSettings | SpawnRunner | Terminate


@dataclass(frozen=True)
class WizardState:
    """
    Current position in the wizard.

    ``cursor`` is a row index on the feature screen and a yes/no choice on
    the save dialog. On the feature screen it may rest one row past the last
    feature, where nothing is highlighted and toggling does nothing.
    """

    screen: Screen = Screen.CHOOSE_FEATURES
    cursor: int = 0
    selection: frozenset[int] = field(default_factory=frozenset)
    variant: FlowVariant = FlowVariant.RUN

    @property
    def selected_kinds(self) -> list[FeatureKind]:
        return kinds_for(self.selection)

    @property
    def selected_flags(self) -> list[str]:
        return flags_for(self.selection)


def initial_state(variant: FlowVariant = FlowVariant.RUN) -> WizardState:
    """Fresh state on the feature screen with nothing selected."""
    return WizardState(variant=variant)


def toggle(selection: frozenset[int], index: int) -> frozenset[int]:
    """Add ``index`` if absent, remove it if present."""
    if index in selection:
        return selection - {index}
    return selection | {index}


def _choose_features(state: WizardState, key: str) -> tuple[WizardState, Effect | None]:
    catalog_length = len(all_features())

    if key in QUIT_KEYS:
        return state, Terminate()
    if key in UP_KEYS:
        if state.cursor > 0:
            return replace(state, cursor=state.cursor - 1), None
    elif key in DOWN_KEYS:
        if state.cursor < catalog_length:
            return replace(state, cursor=state.cursor + 1), None
    elif key == TOGGLE_KEY:
        if state.cursor < catalog_length:
            return replace(state, selection=toggle(state.selection, state.cursor)), None
    elif key == CONFIRM_KEY:
        return replace(state, screen=Screen.CONFIRM_SAVE, cursor=YES), None
    else:
        logger.debug("Ignoring key %r on feature screen", key)

    return state, None


def _confirm_save(state: WizardState, key: str) -> tuple[WizardState, Effect | None]:
    if key in QUIT_KEYS:
        return state, Terminate()
    if key in LEFT_KEYS:
        if state.cursor == NO:
            return replace(state, cursor=YES), None
    elif key in RIGHT_KEYS:
        if state.cursor == YES:
            return replace(state, cursor=NO), None
    elif key == CONFIRM_KEY:
        next_screen = Screen.CONFIRM_RUN if state.variant == FlowVariant.RUN else Screen.DONE
        next_state = replace(state, screen=next_screen)
        if state.cursor == YES:
            return next_state, WriteSettings(tuple(state.selected_kinds))
        return next_state, None
    else:
        logger.debug("Ignoring key %r on save dialog", key)

    return state, None


def _confirm_run(state: WizardState, key: str) -> tuple[WizardState, Effect | None]:
    if key in QUIT_KEYS:
        return state, Terminate()
    if key == CONFIRM_KEY:
        return replace(state, screen=Screen.DONE), SpawnRunner(tuple(state.selected_flags))

    logger.debug("Ignoring key %r on run dialog", key)
    return state, None


def _done(state: WizardState, key: str) -> tuple[WizardState, Effect | None]:
    return state, Terminate()


_HANDLERS = {
    Screen.CHOOSE_FEATURES: _choose_features,
    Screen.CONFIRM_SAVE: _confirm_save,
    Screen.CONFIRM_RUN: _confirm_run,
    Screen.DONE: _done,
}


def transition(state: WizardState, key: str) -> tuple[WizardState, Effect | None]:
    """
    Apply one key press to the wizard.

    Args:
        state: Current wizard state.
        key: Key name as reported by the terminal (e.g. ``"up"``, ``"space"``).

    Returns:
        Tuple of (next state, effect or None).
    """
    next_state, effect = _HANDLERS[state.screen](state, key)
    if next_state != state or effect is not None:
        logger.debug(
            "%s --%s--> %s cursor=%d effect=%s",
            state.screen.name,
            key,
            next_state.screen.name,
            next_state.cursor,
            type(effect).__name__ if effect else None,
        )
    return next_state, effect
