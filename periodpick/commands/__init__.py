"""CLI command implementations for periodpick."""
