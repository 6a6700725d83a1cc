"""Task and comment writes."""

import logging
from collections.abc import Mapping
from typing import Any

from organizer.store import Store

logger = logging.getLogger(__name__)

# Fields a task update may change, in the order they are applied
UPDATABLE_TASK_FIELDS = ("group", "name", "isComplete")


def add_new_task(store: Store, task: Mapping[str, Any]) -> None:
    """Insert a task document."""
    store.collection("tasks").insert_one(task)
    logger.info(f"Task {task.get('id')} created for owner {task.get('owner')}")


def update_task(store: Store, task: Mapping[str, Any]) -> int:
    """
    Apply the fields present in ``task`` to the stored task with the same id.

    Each present field is written with its own ``$set``. A field explicitly
    set to a falsy value (``isComplete=False``) is still written.

    Returns:
        Number of updates issued
    """
    tasks = store.collection("tasks")
    updates = 0
    for field in UPDATABLE_TASK_FIELDS:
        if field in task:
            tasks.update_one({"id": task.get("id")}, {"$set": {field: task[field]}})
            updates += 1
    return updates


def add_comment(store: Store, comment: Mapping[str, Any]) -> None:
    """Insert a comment document."""
    store.collection("comments").insert_one(comment)
    logger.info(f"Comment {comment.get('id')} added to task {comment.get('task')}")
