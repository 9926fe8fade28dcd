"""Command-line interface for installer-assets."""

from __future__ import annotations

from installer_assets.cli.main import cli

__all__ = ["cli"]
