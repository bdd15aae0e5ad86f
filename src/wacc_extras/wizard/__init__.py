"""
Extra credit wizard core.

UI-agnostic state machine and text rendering. The Textual session in
``wacc_extras.tui`` drives it and carries out the effects it requests.
"""

from wacc_extras.wizard.state import (
    Effect,
    FlowVariant,
    Screen,
    SpawnRunner,
    Terminate,
    WizardState,
    WriteSettings,
    initial_state,
    transition,
)
from wacc_extras.wizard.view import render

__all__ = [
    "Effect",
    "FlowVariant",
    "Screen",
    "SpawnRunner",
    "Terminate",
    "WizardState",
    "WriteSettings",
    "initial_state",
    "render",
    "transition",
]
