from __future__ import annotations
import os
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict


class Backend(str, Enum):
    memory = "memory"
    sqlite = "sqlite"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "INFO"
    log_dir: Path = Path("./logs")
    backend: Backend = Backend.memory
    db_path: str = "./data/taskdesk.db"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if env is None else env
        return cls(
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_dir=Path(env.get("LOG_DIR", "./logs")),
            backend=env.get("TASK_BACKEND", Backend.memory.value).strip().lower(),
            db_path=env.get("DB_PATH", "./data/taskdesk.db"),
        )
