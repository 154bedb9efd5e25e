from .todo_item import TodoItem, Importance

__all__ = [
    "TodoItem",
    "Importance",
]
