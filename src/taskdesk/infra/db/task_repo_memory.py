from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from taskdesk.domain.task_models import Task

class InMemoryTaskRepo:
    """
    Process-local store. Tasks are kept in insertion order with an id index
    for lookups; list() hands out a tuple so callers can't mutate the store.
    """
    def __init__(self):
        self._tasks: List[Task] = []
        self._by_id: Dict[str, Task] = {}

    async def add(self, task: Task) -> None:
        self._tasks.append(task)
        self._by_id[task.id] = task

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        return self._by_id.get(task_id)

    async def list(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    async def count(self) -> int:
        return len(self._tasks)

    async def close(self) -> None:
        """Nothing to release; here so every TaskRepo can be closed the same way."""
        return
