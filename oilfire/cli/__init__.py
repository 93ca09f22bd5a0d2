"""Oilfire command-line interface package.

Supports ``python -m oilfire.cli`` as an alternative to the ``oilfire`` entry point.
"""

from oilfire.cli.main import cli, main

__all__ = ["cli", "main"]
