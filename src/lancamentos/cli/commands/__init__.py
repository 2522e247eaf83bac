"""CLI commands for lancamentos."""
