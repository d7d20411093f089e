"""Command line interface for mdpick."""
