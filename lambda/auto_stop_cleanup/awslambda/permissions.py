"""Lambda resource-policy cleanup."""

from __future__ import annotations
from typing import Any

from ..models import CleanupAction, DONE, NOT_FOUND, SKIPPED, DRY_RUN_STATUS
from ..models.config import DRY_RUN
from ..utils import get_logger, ignore_not_found

logger = get_logger()


def remove_lambda_permission(
    lambda_client: Any, function_name: str, statement_id: str
) -> CleanupAction:
    """Remove the invoke permission granted to the rule for the identifier."""
    if not function_name:
        logger.warning(
            f"LAMBDA_ARN is not configured, skipping permission {statement_id}"
        )
        return CleanupAction(
            "lambda_permission", statement_id, "REMOVE_PERMISSION", SKIPPED
        )

    if DRY_RUN:
        logger.info(
            "Would REMOVE lambda permission",
            extra={
                "dry_run": True,
                "function_name": function_name,
                "statement_id": statement_id,
            },
        )
        return CleanupAction(
            "lambda_permission",
            statement_id,
            "REMOVE_PERMISSION",
            DRY_RUN_STATUS,
            reason=function_name,
        )

    removed = ignore_not_found(
        lambda: lambda_client.remove_permission(
            FunctionName=function_name, StatementId=statement_id
        ),
        f"Lambda does not have a policy for StatementId: {statement_id}",
    )
    return CleanupAction(
        "lambda_permission",
        statement_id,
        "REMOVE_PERMISSION",
        DONE if removed else NOT_FOUND,
        reason=function_name,
    )
