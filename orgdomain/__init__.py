"""Organization value objects, read models, in-memory stores and query handling."""

__version__ = "0.3.0"