"""Command-line interface for wacc-extras."""

from wacc_extras.cli.app import app

__all__ = ["app"]
