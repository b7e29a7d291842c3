"""Command-line interface for boilerkit."""

from boilerkit.cli.app import app

__all__ = ["app"]
