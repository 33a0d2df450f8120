"""Command-line interface for lambdagen."""
