"""
Main Typer application for the wacc-extras CLI.

Running ``wacc-extras`` without a subcommand launches the wizard.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from wacc_extras import __version__
from wacc_extras.cli.commands import config
from wacc_extras.cli.output import print_error, print_info, print_success, print_table
from wacc_extras.config import Config, ConfigurationError, LoggingConfig, load_config
from wacc_extras.features import all_features
from wacc_extras.runner import RunnerLauncher
from wacc_extras.storage.paths import expand_path
from wacc_extras.wizard import FlowVariant

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Create the main Typer app
app = typer.Typer(
    name="wacc-extras",
    help="Pick extra credit features and run the compiler test suite with them.",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"wacc-extras version [green]{__version__}[/green]")
        raise typer.Exit()


def setup_logging(settings: LoggingConfig) -> None:
    """Send package log records to the configured file, if any."""
    if settings.file is None:
        return

    handler = logging.FileHandler(expand_path(settings.file), encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("wacc_extras")
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.level)


def _resolve_config(
    runner: str | None,
    save_only: bool,
    log_file: Path | None,
    log_level: str | None,
) -> Config:
    """Load configuration and apply CLI flag overrides."""
    try:
        cfg = load_config()
        updates: dict[str, dict[str, object]] = {}
        if runner:
            updates["runner"] = {"path": runner}
        if save_only:
            updates["wizard"] = {"variant": FlowVariant.SAVE_ONLY.value}
        logging_updates: dict[str, object] = {}
        if log_file is not None:
            logging_updates["file"] = str(log_file)
        if log_level is not None:
            logging_updates["level"] = log_level
        if logging_updates:
            updates["logging"] = logging_updates
        if not updates:
            return cfg

        merged = cfg.model_dump(mode="json")
        for section, values in updates.items():
            merged[section].update(values)
        return Config.model_validate(merged)

    except ValidationError as e:
        raise ConfigurationError(f"Invalid option: {e}") from e


# noinspection PyUnusedLocal
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    runner: Annotated[
        str | None,
        typer.Option(
            "--runner",
            "-r",
            help="Test runner executable to launch.",
        ),
    ] = None,
    save_only: Annotated[
        bool,
        typer.Option(
            "--save-only",
            help="Stop after the save dialog instead of offering to run the tests.",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write log records to this file.",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level: DEBUG, INFO, WARNING or ERROR.",
        ),
    ] = None,
) -> None:
    """
    [bold blue]wacc-extras[/bold blue] - extra credit feature picker

    Choose the extra credit features your compiler supports, optionally
    save them to [bold].wacc[/bold], then run the test suite with the
    matching flags.

    Run [bold]wacc-extras[/bold] without arguments to launch the wizard.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        cfg = _resolve_config(runner, save_only, log_file, log_level)
    except ConfigurationError as e:
        print_error(f"Configuration error: {escape(str(e))}")
        raise typer.Exit(1)

    setup_logging(cfg.logging)
    raise typer.Exit(_launch_wizard(cfg))


def _launch_wizard(cfg: Config) -> int:
    """Run the wizard and translate its outcome into an exit status."""
    from wacc_extras.tui import WaccExtrasApp

    wizard = WaccExtrasApp(
        variant=cfg.wizard.variant,
        launcher=RunnerLauncher.from_config(cfg.runner),
    )

    try:
        wizard.run()
    except Exception as e:
        logger.exception("Terminal UI failed")
        print_error(f"Error: {escape(str(e))}")
        return 1

    if wizard.error is not None:
        print_error(escape(str(wizard.error)))
        return wizard.return_code or 1

    if wizard.saved_path is not None:
        print_success(f"Saved extra credit features to {escape(str(wizard.saved_path))}")

    return wizard.return_code or 0


# Register command groups
app.add_typer(config.app, name="config")


@app.command()
def features() -> None:
    """List the extra credit features and their runner flags."""
    rows = [
        [feature.kind.value, feature.display_name, feature.flag]
        for feature in all_features()
    ]
    print_table(["Kind", "Feature", "Flag"], rows, title="Extra Credit Features")


if __name__ == "__main__":
    app()
