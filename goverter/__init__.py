"""Setting, comment, enum, error-path and command-line parsing for a converter generator."""

__version__ = "0.1.0"