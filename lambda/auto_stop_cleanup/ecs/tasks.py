"""ECS/Fargate task operations."""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from ..models import CleanupAction, DONE, DRY_RUN_STATUS
from ..models.config import DRY_RUN, MAX_PARALLEL_STOPS
from ..utils import cluster_kwargs, get_logger

logger = get_logger()


def list_tasks_started_by(ecs: Any, started_by: str, cluster: str = "") -> list[str]:
    """List ARNs of tasks whose startedBy matches the correlation key."""
    task_arns: list[str] = []
    paginator = ecs.get_paginator("list_tasks")
    for page in paginator.paginate(startedBy=started_by, **cluster_kwargs(cluster)):
        task_arns.extend(page.get("taskArns", []))
    return task_arns


def _stop_task(ecs: Any, task_arn: str, cluster: str, reason: str) -> CleanupAction:
    if DRY_RUN:
        logger.info(
            "Would STOP task",
            extra={"dry_run": True, "task_arn": task_arn, "cluster": cluster},
        )
        return CleanupAction(
            "ecs_task", task_arn, "STOP_TASK", DRY_RUN_STATUS, reason=reason
        )

    ecs.stop_task(task=task_arn, reason=reason, **cluster_kwargs(cluster))
    logger.info("STOP task", extra={"task_arn": task_arn, "cluster": cluster})
    return CleanupAction("ecs_task", task_arn, "STOP_TASK", DONE, reason=reason)


def stop_tasks(
    ecs: Any, task_arns: list[str], cluster: str, reason: str
) -> list[CleanupAction]:
    """
    Stop every task in parallel.

    All StopTask calls run to completion before the first failure, if any,
    is raised.
    """
    if not task_arns:
        return []

    workers = max(1, min(MAX_PARALLEL_STOPS, len(task_arns)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_stop_task, ecs, task_arn, cluster, reason)
            for task_arn in task_arns
        ]
    return [future.result() for future in futures]


def stop_tasks_started_by(
    ecs: Any,
    started_by: str,
    cluster: str,
    reason: str,
    field: str = "taskID",
) -> list[CleanupAction]:
    """Stop all tasks started by the given correlation key."""
    task_arns = list_tasks_started_by(ecs, started_by, cluster)
    if not task_arns:
        logger.warning(f"No tasks found for {field}: {started_by}")
        return []

    logger.info(
        f"Stopping {len(task_arns)} tasks",
        extra={field: started_by, "cluster": cluster},
    )
    return stop_tasks(ecs, task_arns, cluster, reason)
