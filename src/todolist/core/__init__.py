"""Core contracts shared by the task store and its adapters."""
