"""Utility functions for the cleanup Lambdas."""

from .aws_helpers import (
    create_session,
    cluster_kwargs,
    event_bus_kwargs,
    is_not_found,
    ignore_not_found,
)
from .logging_config import get_logger

__all__ = [
    "create_session",
    "cluster_kwargs",
    "event_bus_kwargs",
    "is_not_found",
    "ignore_not_found",
    "get_logger",
]
