"""Logging configuration using AWS Lambda Powertools."""

import os

from aws_lambda_powertools import Logger

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Structured JSON logs with Lambda context injected by the entry points
logger = Logger(
    service="auto-stop-cleanup",
    level=LOG_LEVEL,
)


def get_logger():
    """Get the shared Powertools logger."""
    return logger
