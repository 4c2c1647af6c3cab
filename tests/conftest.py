"""Pytest configuration and fixtures."""

import os
import pytest
from unittest.mock import Mock
from moto import mock_aws
import boto3

# Set test environment variables
os.environ["AWS_ACCESS_KEY_ID"] = "test"
os.environ["AWS_SECRET_ACCESS_KEY"] = "test"
os.environ["AWS_SECURITY_TOKEN"] = "test"
os.environ["AWS_SESSION_TOKEN"] = "test"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ.pop("AWS_ENDPOINT_URL", None)


@pytest.fixture
def ssm():
    """Mock SSM Parameter Store."""
    with mock_aws():
        yield boto3.client("ssm", region_name="us-east-1")


@pytest.fixture
def mock_logger():
    """Mock logger."""
    logger = Mock()
    logger.info.return_value = None
    logger.error.return_value = None
    logger.warning.return_value = None
    return logger
