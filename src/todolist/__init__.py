"""Single-user to-do list: one command per invocation, persisted as JSON."""

__version__ = "0.1.0"
