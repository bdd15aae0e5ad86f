"""Screens for the wacc-extras TUI."""

from wacc_extras.tui.screens.wizard import WizardScreen

__all__ = ["WizardScreen"]
