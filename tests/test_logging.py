from __future__ import annotations

import json
import logging
import sys

import pytest

from taskdesk.config import Settings
from taskdesk.observability.logging import JsonFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    rec = logging.LogRecord("taskdesk.tasks", logging.INFO, __file__, 1, "task.create", (), None)
    rec.__dict__.update(extra)
    return rec


def test_json_formatter_includes_extras() -> None:
    line = JsonFormatter().format(_record(category="tasks", event="task.create", task_id="t1"))
    obj = json.loads(line)

    assert obj["level"] == "INFO"
    assert obj["logger"] == "taskdesk.tasks"
    assert obj["msg"] == "task.create"
    assert obj["category"] == "tasks"
    assert obj["task_id"] == "t1"
    assert obj["ts"].endswith("Z")
    assert "lineno" not in obj


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        rec = logging.LogRecord("taskdesk.db", logging.ERROR, __file__, 1, "db.error", (), sys.exc_info())
    obj = json.loads(JsonFormatter().format(rec))
    assert "RuntimeError: boom" in obj["exc"]


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, JsonFormatter):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def test_setup_logging_writes_jsonl(tmp_path, restore_root_logging) -> None:
    path = setup_logging(Settings(log_level="info", log_dir=tmp_path))
    logging.getLogger("taskdesk.system").info(
        "system.start", extra={"category": "system", "event": "system.start"}
    )
    for h in logging.getLogger().handlers:
        h.flush()

    lines = path.read_text(encoding="utf-8").splitlines()
    obj = json.loads(lines[-1])
    assert path.name == "taskdesk.jsonl"
    assert obj["event"] == "system.start"
    assert obj["level"] == "INFO"


def test_setup_logging_reads_settings_from_env(tmp_path, monkeypatch, restore_root_logging) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "env-logs"))
    monkeypatch.setenv("LOG_LEVEL", "warning")

    path = setup_logging()

    assert path == tmp_path / "env-logs" / "taskdesk.jsonl"
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_does_not_stack_handlers(tmp_path, restore_root_logging) -> None:
    settings = Settings(log_dir=tmp_path)
    setup_logging(settings)
    setup_logging(settings)

    ours = [h for h in logging.getLogger().handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(ours) == 2
