from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy import Integer, String, DateTime, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from taskdesk.domain.task_models import Task, TaskPriority

logger = logging.getLogger("taskdesk.db")


class Base(DeclarativeBase):
    pass


class TaskRow(Base):
    __tablename__ = "tasks"

    # seq records insertion order; created_at alone can tie
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(140), nullable=False)
    priority: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    @classmethod
    def from_domain(cls, task: Task) -> TaskRow:
        return cls(
            id=task.id,
            name=task.name,
            priority=task.priority.value,
            created_at=task.created_at,
        )

    def to_domain(self) -> Task:
        created_at = self.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; we only ever store UTC
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Task(
            id=self.id,
            name=self.name,
            priority=TaskPriority(self.priority),
            created_at=created_at,
        )


class SQLiteTaskRepo:
    def __init__(self, engine: AsyncEngine, sessionmaker: async_sessionmaker[AsyncSession]):
        self.engine = engine
        self.sessionmaker = sessionmaker

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("db.ready", extra={"category": "db", "event": "db.ready", "url": str(self.engine.url)})

    async def close(self) -> None:
        await self.engine.dispose()

    async def add(self, task: Task) -> None:
        async with self.sessionmaker() as session:
            session.add(TaskRow.from_domain(task))
            await session.commit()

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        async with self.sessionmaker() as session:
            res = await session.execute(select(TaskRow).where(TaskRow.id == task_id))
            row = res.scalar_one_or_none()
            return row.to_domain() if row else None

    async def list(self) -> Tuple[Task, ...]:
        async with self.sessionmaker() as session:
            res = await session.execute(select(TaskRow).order_by(TaskRow.seq))
            rows = res.scalars().all()
            return tuple(r.to_domain() for r in rows)

    async def count(self) -> int:
        async with self.sessionmaker() as session:
            res = await session.execute(select(func.count()).select_from(TaskRow))
            return res.scalar_one()
