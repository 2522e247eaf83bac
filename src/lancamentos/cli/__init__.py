"""Command line interface for lancamentos."""
