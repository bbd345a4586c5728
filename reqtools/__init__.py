"""Building blocks for HTTP clients: URL and header types, timeouts, parsing helpers and a thread pool."""

__version__ = "0.1.0"

__all__ = ["types", "timeout", "util", "threadpool"]