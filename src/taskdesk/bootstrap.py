"""
Composition root: build a repository, wrap it in a TaskService and hand
that service to users. Whether users share tasks is decided here.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple, Union

from taskdesk.config import Backend, Settings
from taskdesk.domain.ports import TaskRepo
from taskdesk.domain.users import BaseUser, UserFactory, UserRole
from taskdesk.infra.db.sqlite import make_sqlite_url, make_engine, make_sessionmaker
from taskdesk.infra.db.task_repo_memory import InMemoryTaskRepo
from taskdesk.infra.db.task_repo_sqlite import SQLiteTaskRepo
from taskdesk.services.task_service import TaskService

logger = logging.getLogger("taskdesk.system")


async def make_repo(settings: Settings) -> TaskRepo:
    if settings.backend == Backend.memory:
        return InMemoryTaskRepo()

    engine = make_engine(make_sqlite_url(settings.db_path))
    repo = SQLiteTaskRepo(engine, make_sessionmaker(engine))
    try:
        await repo.create_schema()
    except Exception:
        await repo.close()
        raise
    return repo


async def make_task_service(settings: Optional[Settings] = None) -> TaskService:
    settings = settings or Settings.from_env()
    svc = TaskService(await make_repo(settings))
    logger.info(
        "service.ready",
        extra={"category": "system", "event": "service.ready", "backend": settings.backend.value},
    )
    return svc


async def make_users(
    specs: Iterable[Tuple[Union[UserRole, str], str]],
    *,
    shared: bool = True,
    settings: Optional[Settings] = None,
) -> List[BaseUser]:
    """
    Build one user per (role, name) pair.

    With shared=True every user gets the same TaskService and sees the same
    tasks; otherwise each user gets a private service over its own repository.
    A SQLite file can't back private repositories since every engine opened
    on it sees the same table.
    """
    settings = settings or Settings.from_env()
    if not shared and settings.backend == Backend.sqlite and settings.db_path != ":memory:":
        raise ValueError("isolated users need the memory backend or DB_PATH=:memory:")

    # reject bad input before any storage is opened
    parsed = [(UserFactory.parse_role(role), name) for role, name in specs]
    for _, name in parsed:
        UserFactory.check_name(name)

    services: List[TaskService] = []
    users: List[BaseUser] = []
    try:
        for role, name in parsed:
            if not services or not shared:
                services.append(await make_task_service(settings))
            users.append(UserFactory.create_user(role, name, services[-1]))
    except Exception:
        for svc in services:
            await svc.close()
        raise
    return users
