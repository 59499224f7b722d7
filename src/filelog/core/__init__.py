"""Core logger and line formatting."""
