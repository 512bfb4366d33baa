from __future__ import annotations
from typing import Callable, Sequence

from taskdesk.domain.task_models import Task, TaskPriority

# Strategies are pure: they never touch storage and keep input order.
# Add a new class here for a new criterion; users and the service stay as they are.


class PredicateFilter:
    def __init__(self, predicate: Callable[[Task], bool]):
        self.predicate = predicate

    def filter(self, tasks: Sequence[Task]) -> list[Task]:
        return [t for t in tasks if self.predicate(t)]


class PriorityFilter(PredicateFilter):
    def __init__(self, priority: TaskPriority):
        self.priority = TaskPriority(priority)
        super().__init__(lambda t: t.priority == self.priority)


class HighPriorityFilter(PriorityFilter):
    def __init__(self):
        super().__init__(TaskPriority.high)


class LowPriorityFilter(PriorityFilter):
    def __init__(self):
        super().__init__(TaskPriority.low)


class NameContainsFilter(PredicateFilter):
    """Case-insensitive substring match on the task name."""

    def __init__(self, text: str):
        self.text = text.casefold()
        super().__init__(lambda t: self.text in t.name.casefold())
