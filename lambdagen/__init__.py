"""lambdagen - generator for specialized functional interface types."""

__version__ = "0.3.0"
