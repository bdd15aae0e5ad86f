"""CLI command modules."""

from wacc_extras.cli.commands import config

__all__ = ["config"]
