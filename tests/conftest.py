"""
Module: conftest.py
Description: Shared pytest fixtures for sqs_util tests.

Provides fake AWS credentials, a moto backed SQS queue and a logging
reset between tests. Uses moto for AWS service mocking to enable fast,
isolated unit tests.
"""

import boto3
import pytest
from moto import mock_aws

from sqs_util.utils.logger import configure_logging

TEST_ACCOUNT_ID = "123456789012"  # moto's default account
TEST_REGION = "us-east-1"
TEST_QUEUE_NAME = "vault-register"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """
    Provide fake AWS credentials and a clean SQS_UTIL_ environment.

    Keeps boto3 from ever reaching a real account and keeps developer
    environment variables from changing flag defaults.
    """
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    for name in ("SQS_UTIL_ACCOUNT_ID", "SQS_UTIL_AWS_REGION",
                 "SQS_UTIL_DELAY_SECONDS", "SQS_UTIL_LOG_LEVEL",
                 "SQS_UTIL_APP_VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default log level after tests that turn on debug output."""
    yield
    configure_logging()


@pytest.fixture
def mock_sqs():
    """
    Start moto's AWS mock for the duration of a test.

    Yields a boto3 SQS client talking to the mocked service.
    """
    with mock_aws():
        yield boto3.client('sqs', region_name=TEST_REGION)


@pytest.fixture
def queue_url(mock_sqs):
    """Create the default test queue and return its URL."""
    response = mock_sqs.create_queue(QueueName=TEST_QUEUE_NAME)
    return response['QueueUrl']


@pytest.fixture
def sample_send_request_data():
    """
    Provide keyword arguments for a valid SendRequest.

    Uses a zero delay so the message can be received right away.
    """
    return {
        "account_id": TEST_ACCOUNT_ID,
        "region": TEST_REGION,
        "queue_names": [TEST_QUEUE_NAME],
        "body": '{"service": "vault", "action": "register"}',
        "attributes": {"env": "prod", "team": "core platform"},
        "delay_seconds": 0,
    }


@pytest.fixture
def receive_messages(mock_sqs):
    """Provide a helper returning every visible message on a queue."""
    def _receive(url):
        response = mock_sqs.receive_message(
            QueueUrl=url,
            MaxNumberOfMessages=10,
            MessageAttributeNames=["All"]
        )
        return response.get("Messages", [])

    return _receive
