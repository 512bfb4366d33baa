import logging
from typing import List, Optional, Tuple
from taskdesk.domain.ports import TaskRepo
from taskdesk.domain.task_models import Task, TaskCreate, TaskPriority

logger = logging.getLogger("taskdesk.tasks")

class TaskService:
    def __init__(self, repo: TaskRepo):
        self.repo = repo

    async def create_task(self, name: str, priority: TaskPriority) -> Task:
        data = TaskCreate(name=name, priority=priority)
        task = Task.create_new(data)
        await self.repo.add(task)
        logger.info(
            "task.create",
            extra={
                "category": "tasks",
                "event": "task.create",
                "task_id": task.id,
                "task_name": task.name,
                "priority": task.priority.value,
            },
        )
        return task

    async def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return await self.repo.find_by_id(task_id)

    async def get_all_tasks(self) -> Tuple[Task, ...]:
        return await self.repo.list()

    async def get_high_priority_tasks(self) -> List[Task]:
        tasks = await self.get_all_tasks()
        return [t for t in tasks if t.priority == TaskPriority.high]

    async def count_tasks(self) -> int:
        return await self.repo.count()

    async def close(self) -> None:
        await self.repo.close()
