"""Allow running as ``python -m wacc_extras``."""

from wacc_extras.cli.app import app

if __name__ == "__main__":
    app()
