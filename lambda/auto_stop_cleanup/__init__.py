"""Auto-stop resource cleanup Lambdas for AWS."""

from .handler import (
    lambda_handler,
    task_cleanup_handler,
    client_cleanup_handler,
    rule_cleanup_handler,
    event_source_cleanup_handler,
)

__version__ = "1.0.0"
__description__ = "Cleanup of ECS tasks, CloudWatch Events rules and Lambda permissions after auto-stop"

__all__ = [
    "lambda_handler",
    "task_cleanup_handler",
    "client_cleanup_handler",
    "rule_cleanup_handler",
    "event_source_cleanup_handler",
]
