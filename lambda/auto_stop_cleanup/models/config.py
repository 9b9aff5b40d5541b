"""Configuration from environment variables."""

import os

# Credentials used to build every client
ACCESS_KEY = os.environ.get("ACCESS_KEY", "")
SECRET_KEY = os.environ.get("SECRET_KEY", "")
AWS_REGION = os.environ.get("AWS_REGION", "")

# Resources cleaned up after the auto-stop rule fires
FARGATE_CLUSTER = os.environ.get("FARGATE_CLUSTER", "")
LAMBDA_ARN = os.environ.get("LAMBDA_ARN", "")
EVENT_BUS_NAME = os.environ.get("EVENT_BUS_NAME", "")

# ECS stop behaviour
STOP_REASON = os.environ.get("STOP_REASON", "Auto-stop rule triggered")
MAX_PARALLEL_STOPS = int(os.environ.get("MAX_PARALLEL_STOPS", "10"))

DRY_RUN = os.environ.get("DRY_RUN", "false").lower() == "true"

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def get_credentials() -> dict[str, str]:
    """Return boto3 credential kwargs, failing when either key is missing."""
    if not ACCESS_KEY or not SECRET_KEY:
        raise ValueError("AWS ECS credentials are not defined.")
    return {
        "aws_access_key_id": ACCESS_KEY,
        "aws_secret_access_key": SECRET_KEY,
    }


class Config:
    """Configuration singleton."""

    def __init__(self):
        self.access_key = ACCESS_KEY
        self.secret_key = SECRET_KEY
        self.region = AWS_REGION
        self.cluster = FARGATE_CLUSTER
        self.lambda_arn = LAMBDA_ARN
        self.event_bus_name = EVENT_BUS_NAME
        self.stop_reason = STOP_REASON
        self.max_parallel_stops = MAX_PARALLEL_STOPS
        self.dry_run = DRY_RUN
