"""Parse .env file lines into key and value pairs."""

__version__ = "0.1.0"
__all__ = ["errors", "parse"]