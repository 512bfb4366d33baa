from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
from datetime import datetime, timezone
from typing import Optional
import threading
import uuid

class TaskPriority(str, Enum):
    high = "HIGH"
    low = "LOW"

class TaskCreate(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=140)
    priority: TaskPriority

class Task(TaskCreate):
    id: str = Field(min_length=1)
    created_at: datetime

    @classmethod
    def create_new(cls, data: TaskCreate) -> Task:
        """
        Mint a new task from validated input.

        This is the only place a task gets its id and creation time;
        storage backends rebuild tasks from stored fields but never mint them.
        """
        return cls(
            id=new_task_id(),
            name=data.name,
            priority=data.priority,
            created_at=utc_now(),
        )

def new_task_id() -> str:
    return str(uuid.uuid4())


_clock_lock = threading.Lock()
_last_now: Optional[datetime] = None

def utc_now() -> datetime:
    # never goes backwards, even if the wall clock does
    global _last_now
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_now is not None and now < _last_now:
            now = _last_now
        _last_now = now
        return now
