from .commands import Add, Command, Modify, Print, Remove
from .task_store import TaskStore

__all__ = ["Add", "Command", "Modify", "Print", "Remove", "TaskStore"]
