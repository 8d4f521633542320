"""Console client and library for requesting generated CSV test data from a service."""

__version__ = "0.1.0"