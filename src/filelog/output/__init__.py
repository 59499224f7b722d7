"""Terminal output for the filelog CLI."""
