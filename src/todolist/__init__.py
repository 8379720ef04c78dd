"""Single-list task manager with a durable key-value slot."""

__version__ = "0.1.0"
