"""Typer front end for azureauth-cli."""

__version__ = "0.1.0"
