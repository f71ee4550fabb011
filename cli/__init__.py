"""
Command line interface for hiera.

Installed as the ``hiera`` console script and runnable as ``python -m cli``;
both hand off to the Typer application in :mod:`cli.commands`.
"""

from .commands import app


def main() -> None:
    """Run the hiera Typer application."""
    app()
