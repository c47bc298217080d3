"""Console manager and library for a semicolon-separated file of named resources."""

__version__ = "0.1.0"