"""Command-line interface for boardsync."""

from boardsync.cli.app import main
from boardsync.cli.parser import build_parser

__all__ = ["build_parser", "main"]
