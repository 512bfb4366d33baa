"""
Ports (interfaces) between the layers.

Users depend on a TaskService-shaped object, the service depends on a
TaskRepo-shaped object. Concrete classes are injected at construction time.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from taskdesk.domain.task_models import Task, TaskPriority


class TaskRepo(Protocol):
    """Storage backend. Must keep insertion order and never hand out mutable state."""

    async def add(self, task: Task) -> None: ...
    async def list(self) -> tuple[Task, ...]: ...
    async def find_by_id(self, task_id: str) -> Optional[Task]: ...
    async def count(self) -> int: ...
    async def close(self) -> None: ...


class TaskServiceLike(Protocol):
    async def create_task(self, name: str, priority: TaskPriority) -> Task: ...
    async def get_all_tasks(self) -> tuple[Task, ...]: ...
    async def get_task_by_id(self, task_id: str) -> Optional[Task]: ...
    async def get_high_priority_tasks(self) -> list[Task]: ...
    async def close(self) -> None: ...


class FilterStrategy(Protocol):
    def filter(self, tasks: Sequence[Task]) -> list[Task]: ...
