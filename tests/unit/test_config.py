"""Unit tests for environment configuration and credentials."""

from __future__ import annotations
import pytest
from unittest.mock import patch

from auto_stop_cleanup.models import config


@pytest.mark.unit
class TestGetCredentials:
    """Test credential validation."""

    @patch("auto_stop_cleanup.models.config.SECRET_KEY", "secret")
    @patch("auto_stop_cleanup.models.config.ACCESS_KEY", "AKIATEST")
    def test_returns_boto3_credential_kwargs(self):
        """
        GIVEN both ACCESS_KEY and SECRET_KEY are set
        WHEN get_credentials is called
        THEN boto3 credential kwargs should be returned
        """
        assert config.get_credentials() == {
            "aws_access_key_id": "AKIATEST",
            "aws_secret_access_key": "secret",
        }

    @pytest.mark.parametrize(
        "access_key,secret_key",
        [("", "secret"), ("AKIATEST", ""), ("", "")],
    )
    def test_missing_key_raises(self, access_key, secret_key):
        """
        GIVEN either credential is missing
        WHEN get_credentials is called
        THEN ValueError should be raised
        """
        with patch.object(config, "ACCESS_KEY", access_key), patch.object(
            config, "SECRET_KEY", secret_key
        ):
            with pytest.raises(ValueError, match="credentials are not defined"):
                config.get_credentials()


@pytest.mark.unit
def test_config_mirrors_module_constants():
    """Config singleton exposes the module-level settings."""
    cfg = config.Config()

    assert cfg.cluster == config.FARGATE_CLUSTER
    assert cfg.lambda_arn == config.LAMBDA_ARN
    assert cfg.stop_reason == config.STOP_REASON
    assert cfg.max_parallel_stops == config.MAX_PARALLEL_STOPS
    assert cfg.dry_run == config.DRY_RUN
