"""Text frames for each wizard screen."""

from wacc_extras.features import all_features
from wacc_extras.wizard.state import NO, YES, Screen, WizardState

FEATURES_HEADER = "Select the extra credit features that you want."
FEATURES_FOOTER = "Press Enter to continue.\nPress q to quit."
SAVE_PROMPT = "Do you want to save these extra credit features to a json file?"
SAVE_FOOTER = "Press q to quit, press Enter to continue."
RUN_PROMPT = (
    "Are you sure, if you want to run the test compiler? "
    "[press enter to continue, q to exit]"
)


def _checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def render_choose_features(state: WizardState) -> str:
    lines = [FEATURES_HEADER, ""]
    for i, feature in enumerate(all_features()):
        cursor = ">" if state.cursor == i else " "
        lines.append(f"{cursor} {_checkbox(i in state.selection)} {feature.display_name}")
    return "\n".join(lines) + f"\n\n{FEATURES_FOOTER}\n"


def render_confirm_save(state: WizardState) -> str:
    yes = _checkbox(state.cursor == YES)
    no = _checkbox(state.cursor == NO)
    return f"{SAVE_PROMPT}\n{yes} yes {no} no\n\n{SAVE_FOOTER}\n"


def render_confirm_run(state: WizardState) -> str:
    return f"{RUN_PROMPT}\n"


def render(state: WizardState) -> str:
    """Render the frame for the current screen. The finished screen is empty."""
    if state.screen == Screen.CHOOSE_FEATURES:
        return render_choose_features(state)
    if state.screen == Screen.CONFIRM_SAVE:
        return render_confirm_save(state)
    if state.screen == Screen.CONFIRM_RUN:
        return render_confirm_run(state)
    return ""
