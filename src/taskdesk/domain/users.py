from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Sequence, Type, Union

from taskdesk.domain.errors import InvalidRole, NotAuthenticated
from taskdesk.domain.ports import FilterStrategy, TaskServiceLike
from taskdesk.domain.task_models import Task, TaskPriority

logger = logging.getLogger("taskdesk.users")

class UserRole(str, Enum):
    regular = "regular"
    admin = "admin"


class BaseUser(ABC):
    """
    Session state plus task operations delegated to a TaskService.

    A user never holds tasks itself. Writes require a logged-in session,
    reads do not. Build users through UserFactory.create_user.
    """

    @property
    @abstractmethod
    def role(self) -> UserRole: ...

    def __init__(self, name: str, task_service: TaskServiceLike, logged_in: bool = False):
        self._name = name
        self._task_service = task_service
        self._logged_in = logged_in

    @property
    def name(self) -> str:
        return self._name

    @property
    def task_service(self) -> TaskServiceLike:
        return self._task_service

    def get_name(self) -> str:
        return self._name

    def get_role(self) -> UserRole:
        return self.role

    def login(self) -> None:
        self._logged_in = True
        logger.info("user.login", extra={"category": "users", "event": "user.login", "user": self._name})

    def logout(self) -> None:
        self._logged_in = False
        logger.info("user.logout", extra={"category": "users", "event": "user.logout", "user": self._name})

    def is_logged_in(self) -> bool:
        return self._logged_in

    async def add_task(self, name: str, priority: TaskPriority) -> Task:
        if not self._logged_in:
            logger.warning(
                "user.add_task.denied",
                extra={"category": "users", "event": "user.add_task.denied", "user": self._name},
            )
            raise NotAuthenticated(self._name)
        return await self._task_service.create_task(name, priority)

    async def get_all_tasks(self) -> tuple[Task, ...]:
        return await self._task_service.get_all_tasks()

    async def filter_tasks(self, strategy: FilterStrategy) -> list[Task]:
        tasks: Sequence[Task] = await self._task_service.get_all_tasks()
        return strategy.filter(tasks)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, logged_in={self._logged_in})"


class RegularUser(BaseUser):
    role = UserRole.regular


class AdminUser(BaseUser):
    role = UserRole.admin

    async def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return await self._task_service.get_task_by_id(task_id)


class UserFactory:
    _variants: Dict[UserRole, Type[BaseUser]] = {
        UserRole.regular: RegularUser,
        UserRole.admin: AdminUser,
    }

    @staticmethod
    def parse_role(role: Union[UserRole, str]) -> UserRole:
        if isinstance(role, UserRole):
            return role
        if isinstance(role, str):
            try:
                return UserRole(role.strip().lower())
            except ValueError:
                raise InvalidRole(role) from None
        raise InvalidRole(role)

    @staticmethod
    def check_name(name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"user name must not be blank: {name!r}")

    @classmethod
    def create_user(
        cls,
        role: Union[UserRole, str],
        name: str,
        task_service: TaskServiceLike,
        *,
        logged_in: bool = True,
    ) -> BaseUser:
        parsed = cls.parse_role(role)
        cls.check_name(name)
        user = cls._variants[parsed](name, task_service, logged_in=logged_in)
        logger.info(
            "user.create",
            extra={"category": "users", "event": "user.create", "user": name, "role": parsed.value},
        )
        return user
