"""Command line interface for the SET engine."""
