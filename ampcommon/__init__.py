"""Character schema, source-control models with GitHub payload mapping, and synchronization events."""

__version__ = "0.1.0"