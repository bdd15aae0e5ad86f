"""
wacc-extras - Extra credit feature picker for the C compiler test suite.

An interactive terminal wizard that selects extra credit features,
optionally saves them to a settings file, and launches the test runner
with the matching command-line flags.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("wacc-extras")
except PackageNotFoundError:
    __version__ = "0.1.0"

# The terminal belongs to the TUI; records only go out when a file handler is configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
]
