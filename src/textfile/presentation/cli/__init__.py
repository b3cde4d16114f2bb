"""Typer CLI for textfile."""

from textfile.presentation.cli.app import app

__all__ = ["app"]
