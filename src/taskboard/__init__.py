"""Console task board with a durable local mirror and a remote todo viewer."""

__version__ = "0.1.0"
