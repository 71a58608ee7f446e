from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from core.domain.errors import ValidationError


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: str) -> "TaskStatus":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError("invalid status value") from None


@dataclass(slots=True)
class Task:
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
