"""
Extra credit feature catalog.

The catalog is fixed: four features in a fixed order. Everything that maps
a selection to settings or runner flags walks the catalog in this order.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from wacc_extras.errors import SettingsDecodeError


class FeatureKind(str, Enum):
    """Selectable extra credit features, valued by their settings-file name."""

    BITWISE = "Bitwise"
    COMPOUND = "Compound"
    INCREMENT = "Increment"
    GOTO = "Goto"

    @classmethod
    def from_name(cls, name: str) -> "FeatureKind":
        """
        Parse a settings-file name, ignoring case.

        Raises:
            SettingsDecodeError: If the name is not a known feature kind.
        """
        lowered = name.lower() if isinstance(name, str) else None
        for kind in cls:
            if kind.value.lower() == lowered:
                return kind
        raise SettingsDecodeError(f"Unknown extra credit feature: {name!r}")

    @property
    def feature(self) -> "Feature":
        """Catalog record for this kind."""
        return _FEATURES_BY_KIND[self]


@dataclass(frozen=True)
class Feature:
    """A catalog entry."""

    kind: FeatureKind
    display_name: str
    flag: str


_CATALOG: tuple[Feature, ...] = (
    Feature(FeatureKind.BITWISE, "Bitwise Operations", "--bitwise"),
    Feature(FeatureKind.COMPOUND, "Compound", "--compound"),
    Feature(FeatureKind.INCREMENT, "Increment and Decrement", "--increment"),
    Feature(FeatureKind.GOTO, "Goto statement", "--goto"),
)

_FEATURES_BY_KIND: dict[FeatureKind, Feature] = {f.kind: f for f in _CATALOG}


def all_features() -> tuple[Feature, ...]:
    """Return the catalog in display order."""
    return _CATALOG


def selected_features(selection: Iterable[int]) -> list[Feature]:
    """
    Resolve a set of catalog indices to features in catalog order.

    Indices outside the catalog are ignored.

    Args:
        selection: Catalog indices the user checked.

    Returns:
        The checked features, ordered as in the catalog.
    """
    chosen = set(selection)
    return [feature for i, feature in enumerate(_CATALOG) if i in chosen]


def kinds_for(selection: Iterable[int]) -> list[FeatureKind]:
    """Feature kinds for a selection, in catalog order."""
    return [feature.kind for feature in selected_features(selection)]


def flags_for(selection: Iterable[int]) -> list[str]:
    """Runner flags for a selection, in catalog order."""
    return [feature.flag for feature in selected_features(selection)]
