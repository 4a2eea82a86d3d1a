"""Campus Connect client: session manager and REST API wrappers."""

__version__ = "0.1.0"
