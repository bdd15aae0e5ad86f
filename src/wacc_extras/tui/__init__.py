"""
wacc-extras TUI (Terminal User Interface).

Built with the Textual framework.
"""

from wacc_extras.tui.app import WaccExtrasApp, run_wizard

__all__ = ["WaccExtrasApp", "run_wizard"]
