"""installer-assets CLI commands."""
