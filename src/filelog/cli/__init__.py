"""Command line interface for filelog."""
