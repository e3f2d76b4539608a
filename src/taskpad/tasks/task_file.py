# src/taskpad/tasks/task_file.py

"""
Reading and writing the tasks file.

Both helpers report through StorageResult instead of raising, so the CLI can
log a warning and keep going. A missing file on load is the normal first-run
case and counts as success.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .task_models import StorageResult
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def _decode_lines(raw: bytes) -> tuple[str, int]:
    """Decode line by line; lines that are not valid UTF-8 are dropped and counted."""
    good: list[str] = []
    bad = 0
    for chunk in raw.split(b"\n"):
        try:
            good.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            bad += 1
    return "\n".join(good), bad


def load_tasks_file(store: TaskStore, path: str | Path) -> StorageResult:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.info("No tasks file at %s, starting empty.", path)
        return StorageResult(ok=True, path=path, count=store.count_tasks(), missing=True)
    except OSError as e:
        logger.warning("Failed to read tasks from %s: %s", path, e)
        return StorageResult(ok=False, path=path, count=store.count_tasks(), error=str(e))

    text, undecodable = _decode_lines(raw)
    if undecodable:
        logger.info("Skipped %d undecodable line(s) in %s.", undecodable, path)
    skipped = store.deserialize(text) + undecodable
    count = store.count_tasks()
    logger.info("Loaded %d task(s) from %s (skipped=%d)", count, path, skipped)
    return StorageResult(ok=True, path=path, count=count, skipped=skipped)


def save_tasks_file(store: TaskStore, path: str | Path) -> StorageResult:
    path = Path(path)
    text = store.serialize()
    count = store.count_tasks()
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        logger.warning("Failed to save tasks to %s: %s", path, e)
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp, exc_info=True)
        return StorageResult(ok=False, path=path, count=count, error=str(e))

    logger.info("Saved %d task(s) to %s", count, path)
    return StorageResult(ok=True, path=path, count=count)
