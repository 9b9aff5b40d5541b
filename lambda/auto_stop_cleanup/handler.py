"""Lambda entry points for auto-stop resource cleanup."""

from __future__ import annotations
import json
import time
from typing import Any

from .models import CleanupAction
from .models.config import (
    AWS_REGION,
    DRY_RUN,
    EVENT_BUS_NAME,
    FARGATE_CLUSTER,
    LAMBDA_ARN,
    STOP_REASON,
)
from .utils import create_session, get_logger
from .ecs import stop_tasks_started_by
from .events import (
    remove_rule_targets,
    delete_rule,
    remove_trigger,
    remove_event_bus_permission,
)
from .awslambda import (
    remove_lambda_permission,
    find_event_source_mappings,
    delete_event_source_mappings,
)

logger = get_logger()


def require_identifier(event: dict[str, Any] | None, field: str) -> str:
    """Read the correlation identifier from the event, failing when absent."""
    identifier = event.get(field) if isinstance(event, dict) else None
    if not identifier:
        logger.error(f"Missing {field} in the event object.")
        raise ValueError(f"{field} is required in the event object.")
    return str(identifier)


def explicit_mapping_uuids(event: dict[str, Any]) -> list[str]:
    """Event source mapping UUIDs passed explicitly in the event."""
    uuids = event.get("eventSourceMappingUuids") or []
    if isinstance(uuids, str):
        uuids = [uuids]
    if not isinstance(uuids, (list, tuple)) or not all(
        isinstance(uuid, str) or uuid is None for uuid in uuids
    ):
        logger.error("Invalid eventSourceMappingUuids in the event object.")
        raise ValueError("eventSourceMappingUuids must be a list of strings.")
    return [uuid for uuid in uuids if uuid]


def create_clients() -> tuple[Any, Any, Any]:
    """Build ECS, CloudWatch Events and Lambda clients from one session."""
    session = create_session(AWS_REGION)
    return (
        session.client("ecs"),
        session.client("events"),
        session.client("lambda"),
    )


def cleanup_rule(events: Any, lambda_client: Any, identifier: str) -> list[CleanupAction]:
    """Tear down the rule named after the identifier and its permissions."""
    actions = remove_rule_targets(events, identifier, EVENT_BUS_NAME)
    actions.append(delete_rule(events, identifier, EVENT_BUS_NAME))
    actions.append(remove_event_bus_permission(events, identifier, EVENT_BUS_NAME))
    actions.append(remove_lambda_permission(lambda_client, LAMBDA_ARN, identifier))
    actions.append(remove_trigger(events, identifier, identifier, EVENT_BUS_NAME))
    return actions


def cleanup_event_sources(
    lambda_client: Any, identifier: str, extra_uuids: list[str]
) -> list[CleanupAction]:
    """Delete discovered and explicitly requested event source mappings."""
    uuids = find_event_source_mappings(lambda_client, LAMBDA_ARN, identifier)
    uuids.extend(extra_uuids)
    return delete_event_source_mappings(lambda_client, uuids)


def build_response(identifier: str, actions: list[CleanupAction]) -> dict[str, Any]:
    """Summarize the cleanup for the caller."""
    by_status: dict[str, int] = {}
    for action in actions:
        action.region = action.region or AWS_REGION
        by_status[action.status] = by_status.get(action.status, 0) + 1

    return {
        "statusCode": 200,
        "body": json.dumps(
            {
                "identifier": identifier,
                "dry_run": DRY_RUN,
                "total_actions": len(actions),
                "by_status": by_status,
                "actions": [action.to_dict() for action in actions],
            }
        ),
    }


def _run_cleanup(field: str, event: dict[str, Any], steps) -> dict[str, Any]:
    """Validate, build clients, then run the steps; non-not-found errors propagate."""
    start_time = time.time()
    identifier = require_identifier(event, field)
    mapping_uuids = explicit_mapping_uuids(event)
    logger.append_keys(**{field: identifier})
    logger.info(f"Starting auto-stop cleanup (DRY_RUN={DRY_RUN})")

    ecs, events, lambda_client = create_clients()

    try:
        actions = steps(identifier, mapping_uuids, ecs, events, lambda_client)
        logger.info(
            f"Successfully cleaned up resources and trigger for {field}: {identifier}"
        )
    except Exception as e:
        logger.error(f"Error occurred during cleanup operations: {e}")
        raise

    logger.info(
        f"Cleanup complete: {len(actions)} actions ({time.time() - start_time:.1f}s)"
    )
    return build_response(identifier, actions)


@logger.inject_lambda_context(clear_state=True)
def task_cleanup_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Stop the tasks started for a taskID and remove its auto-stop rule."""

    def steps(task_id, mapping_uuids, ecs, events, lambda_client):
        actions = stop_tasks_started_by(
            ecs, task_id, FARGATE_CLUSTER, STOP_REASON, field="taskID"
        )
        actions.extend(cleanup_rule(events, lambda_client, task_id))
        return actions

    return _run_cleanup("taskID", event, steps)


@logger.inject_lambda_context(clear_state=True)
def client_cleanup_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Same as the task cleanup keyed on clientId, plus event source mappings."""

    def steps(client_id, mapping_uuids, ecs, events, lambda_client):
        actions = stop_tasks_started_by(
            ecs, client_id, FARGATE_CLUSTER, STOP_REASON, field="clientId"
        )
        actions.extend(cleanup_rule(events, lambda_client, client_id))
        actions.extend(
            cleanup_event_sources(lambda_client, client_id, mapping_uuids)
        )
        return actions

    return _run_cleanup("clientId", event, steps)


@logger.inject_lambda_context(clear_state=True)
def rule_cleanup_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Remove a rule, its targets and its permissions; no tasks are touched."""

    def steps(rule_name, mapping_uuids, ecs, events, lambda_client):
        return cleanup_rule(events, lambda_client, rule_name)

    return _run_cleanup("ruleName", event, steps)


@logger.inject_lambda_context(clear_state=True)
def event_source_cleanup_handler(
    event: dict[str, Any], context: Any
) -> dict[str, Any]:
    """Delete a client's event source mappings and its Lambda permission."""

    def steps(client_id, mapping_uuids, ecs, events, lambda_client):
        actions = cleanup_event_sources(lambda_client, client_id, mapping_uuids)
        actions.append(remove_lambda_permission(lambda_client, LAMBDA_ARN, client_id))
        return actions

    return _run_cleanup("clientId", event, steps)


lambda_handler = task_cleanup_handler
