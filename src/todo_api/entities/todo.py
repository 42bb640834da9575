"""Todo domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TodoEntity:
    """Domain entity for a todo item.

    Attributes:
        id: Primary key (0 until persisted)
        title: Short title
        content: Free-form body
        due_date: Deadline, or None when unset
        completed: Completion flag
        user_id: Owner id (not enforced as a foreign key)
    """

    id: int = 0
    title: str = ""
    content: str = ""
    due_date: datetime | None = None
    completed: bool = False
    user_id: int = 0
