# tests/conftest.py

from __future__ import annotations

import pytest

from taskdesk.domain.users import AdminUser, RegularUser, UserFactory
from taskdesk.infra.db.sqlite import make_engine, make_sessionmaker, make_sqlite_url
from taskdesk.infra.db.task_repo_memory import InMemoryTaskRepo
from taskdesk.infra.db.task_repo_sqlite import SQLiteTaskRepo
from taskdesk.services.task_service import TaskService


@pytest.fixture()
def repo() -> InMemoryTaskRepo:
    return InMemoryTaskRepo()


@pytest.fixture()
def service(repo: InMemoryTaskRepo) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def admin(service: TaskService) -> AdminUser:
    user = UserFactory.create_user("admin", "Alice", service)
    assert isinstance(user, AdminUser)
    return user


@pytest.fixture()
def regular(service: TaskService) -> RegularUser:
    user = UserFactory.create_user("regular", "Bob", service)
    assert isinstance(user, RegularUser)
    return user


@pytest.fixture()
async def sqlite_repo(tmp_path):
    """
    SQLiteTaskRepo on a throwaway file, schema created.

    Yields (repo, db_path) so tests can reopen the same file.
    """
    db_path = str(tmp_path / "tasks.db")
    engine = make_engine(make_sqlite_url(db_path))
    repo = SQLiteTaskRepo(engine, make_sessionmaker(engine))
    await repo.create_schema()
    yield repo, db_path
    await repo.close()
