"""
Persisted extra credit settings.

The settings file is a small JSON document written to the working
directory when the user chooses to save. It records the selected feature
kinds in catalog order and is consumed by the test tooling, not by the
wizard itself.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wacc_extras.errors import SettingsDecodeError, SettingsEncodeError, SettingsWriteError
from wacc_extras.features import FeatureKind

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".wacc"

SETTINGS_FILE_MODE = 0o644


class PersistedSettings(BaseModel):
    """On-disk form of the user's selection."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    selected_extra_credits: list[FeatureKind] = Field(
        default_factory=list,
        alias="SelectedExtraCredits",
    )

    @field_validator("selected_extra_credits", mode="before")
    @classmethod
    def _parse_kind_names(cls, value: object) -> object:
        if isinstance(value, list):
            return [
                item if isinstance(item, FeatureKind) else FeatureKind.from_name(item)
                for item in value
            ]
        return value


def encode_settings(kinds: list[FeatureKind]) -> str:
    """
    Serialize selected kinds to the settings JSON document.

    Args:
        kinds: Selected feature kinds, in catalog order.

    Returns:
        JSON text, e.g. ``{"SelectedExtraCredits":["Compound"]}``.

    Raises:
        SettingsEncodeError: If a value is not a known feature kind.
    """
    try:
        settings = PersistedSettings(selected_extra_credits=list(kinds))
        return settings.model_dump_json(by_alias=True)
    except ValueError as e:
        raise SettingsEncodeError(f"Could not encode settings: {e}") from e


def decode_settings(content: str | bytes) -> list[FeatureKind]:
    """
    Parse a settings JSON document back into feature kinds.

    Raises:
        SettingsDecodeError: If the document is malformed or names an unknown kind.
    """
    try:
        return list(PersistedSettings.model_validate_json(content).selected_extra_credits)
    except ValidationError as e:
        raise SettingsDecodeError(f"Could not decode settings: {e}") from e


def get_settings_path(directory: Path | None = None) -> Path:
    """Location of the settings file, defaulting to the current directory."""
    return (directory or Path.cwd()) / SETTINGS_FILENAME


def save_settings(kinds: list[FeatureKind], directory: Path | None = None) -> Path:
    """
    Write the settings file, replacing any existing one.

    Args:
        kinds: Selected feature kinds, in catalog order.
        directory: Directory to write into. Defaults to the current directory.

    Returns:
        Path of the written file.

    Raises:
        SettingsEncodeError: If the kinds cannot be serialized.
        SettingsWriteError: If the file cannot be written.
    """
    content = encode_settings(kinds)
    path = get_settings_path(directory)

    try:
        path.write_text(content, encoding="utf-8")
        path.chmod(SETTINGS_FILE_MODE)
    except OSError as e:
        raise SettingsWriteError(f'Failed to write file "{path.name}": {e}', path=path) from e

    logger.info("Saved %d extra credit feature(s) to %s", len(kinds), path)
    return path
