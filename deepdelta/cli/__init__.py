"""Command-line interface for deepdelta."""
