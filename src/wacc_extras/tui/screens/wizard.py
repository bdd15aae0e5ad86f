"""
Wizard screen for the wacc-extras TUI.

Shows the current text frame and forwards every key press to the session.
"""

from typing import TYPE_CHECKING, cast

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static

from wacc_extras.wizard import render

if TYPE_CHECKING:
    from wacc_extras.tui.app import WaccExtrasApp


class WizardScreen(Screen):
    """Single screen that renders whichever wizard step is current."""

    CSS = """
    WizardScreen {
        padding: 1 2;
    }

    #frame {
        width: 100%;
        height: auto;
    }
    """

    frame = ""

    @property
    def session(self) -> "WaccExtrasApp":
        return cast("WaccExtrasApp", self.app)

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Static(id="frame")

    def on_mount(self) -> None:
        self.refresh_frame()

    def on_key(self, event: events.Key) -> None:
        """Hand the key to the state machine and redraw."""
        event.stop()
        event.prevent_default()
        self.session.handle_key(event.key)
        if self.is_attached:
            self.refresh_frame()

    def refresh_frame(self) -> None:
        self.frame = render(self.session.state)
        # Plain text: the checkboxes would otherwise parse as markup.
        self.query_one("#frame", Static).update(Text(self.frame))
