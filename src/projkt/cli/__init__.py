"""CLI for projkt."""

from projkt.cli.main import app, main


__all__ = ["app", "main"]
