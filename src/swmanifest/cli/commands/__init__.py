"""Additional CLI commands."""
