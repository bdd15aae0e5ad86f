"""
Main wacc-extras TUI application.

Owns the wizard state for the lifetime of the process, feeds it key
presses, and carries out the effects it requests: writing the settings
file and launching the test runner.
"""

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from wacc_extras.errors import WaccExtrasError
from wacc_extras.runner import RunnerLauncher, RunResult
from wacc_extras.settings import save_settings
from wacc_extras.tui.screens.wizard import WizardScreen
from wacc_extras.wizard import (
    Effect,
    FlowVariant,
    Screen,
    SpawnRunner,
    Terminate,
    WriteSettings,
    initial_state,
    transition,
)

logger = logging.getLogger(__name__)


class WaccExtrasApp(App):
    """Extra credit feature wizard."""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "wizard_key('ctrl+c')", "Quit", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        variant: FlowVariant = FlowVariant.RUN,
        launcher: RunnerLauncher | None = None,
        settings_dir: Path | None = None,
    ):
        """Initialize the wizard application.

        Args:
            variant: Whether to offer running the test runner after saving.
            launcher: Test runner launcher. Defaults to the standard runner path.
            settings_dir: Directory for the settings file. Defaults to the working directory.
        """
        super().__init__()
        self.state = initial_state(variant)
        self.launcher = launcher or RunnerLauncher()
        self.settings_dir = settings_dir
        self.error: WaccExtrasError | None = None
        self.saved_path: Path | None = None
        self.run_result: RunResult | None = None
        self._finished = False

    def on_mount(self) -> None:
        """Show the wizard screen."""
        self.push_screen(WizardScreen())

    def action_wizard_key(self, key: str) -> None:
        self.handle_key(key)

    def handle_key(self, key: str) -> None:
        """Advance the wizard by one key press and perform any requested effect."""
        if self._finished:
            return

        self.state, effect = transition(self.state, key)
        if effect is not None and not self.apply_effect(effect):
            return

        if self.state.screen == Screen.DONE:
            self.finish(0)

    def apply_effect(self, effect: Effect) -> bool:
        """
        Carry out an effect requested by the state machine.

        Returns:
            True if the session continues, False if it has ended.
        """
        if isinstance(effect, Terminate):
            logger.info("Wizard quit by user")
            self.finish(0)
            return False

        try:
            if isinstance(effect, WriteSettings):
                self.saved_path = save_settings(list(effect.kinds), self.settings_dir)
            elif isinstance(effect, SpawnRunner):
                self.run_result = self._launch_runner(list(effect.flags))
        except WaccExtrasError as e:
            logger.error("%s", e)
            self.error = e
            self.finish(1)
            return False

        return True

    def _launch_runner(self, flags: list[str]) -> RunResult:
        # Headless drivers (tests) cannot hand the terminal over.
        if self.is_headless:
            return self.launcher.run(flags)
        with self.suspend():
            return self.launcher.run(flags)

    def finish(self, return_code: int) -> None:
        """End the session with the given process exit status."""
        self._finished = True
        self.exit(return_code=return_code)


def run_wizard(
    variant: FlowVariant = FlowVariant.RUN,
    launcher: RunnerLauncher | None = None,
    settings_dir: Path | None = None,
) -> WaccExtrasApp:
    """Run the wizard until it finishes.

    Returns:
        The finished application, carrying its return code and any error.
    """
    app = WaccExtrasApp(variant=variant, launcher=launcher, settings_dir=settings_dir)
    app.run()
    return app
