"""Core models and errors shared by the generator, validation and CLI."""
