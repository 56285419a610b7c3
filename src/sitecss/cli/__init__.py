"""Click command-line interface for sitecss."""
