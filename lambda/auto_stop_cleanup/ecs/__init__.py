"""ECS task cleanup."""

from .tasks import list_tasks_started_by, stop_tasks, stop_tasks_started_by

__all__ = ["list_tasks_started_by", "stop_tasks", "stop_tasks_started_by"]
