"""
Module: test_message.py
Description: Unit tests for SendRequest validation.

Tests Pydantic field constraints, custom validators and conversion of
option-string attributes into SQS message attributes.
"""

import pytest
from pydantic import ValidationError

from sqs_util.models.message import SendRequest


class TestSendRequestModel:
    """Test cases for SendRequest validation and behavior."""

    def test_valid_request_creation(self, sample_send_request_data):
        """Test creating a valid SendRequest instance."""
        request = SendRequest(**sample_send_request_data)

        assert request.account_id == "123456789012"
        assert request.queue_names == ["vault-register"]
        assert request.delay_seconds == 0

    def test_defaults(self):
        request = SendRequest(
            account_id="123456789012",
            region="us-east-1",
            queue_names=["orders"],
            body="hello"
        )

        assert request.attributes == {}
        assert request.delay_seconds == 1

    def test_account_id_too_short(self, sample_send_request_data):
        """Test short or missing account numbers are rejected."""
        for account_id in ("", "12345678901"):
            sample_send_request_data["account_id"] = account_id
            with pytest.raises(ValidationError, match="missing or invalid account length"):
                SendRequest(**sample_send_request_data)

    def test_queue_names_validation(self, sample_send_request_data):
        """Test empty queue lists and short queue names are rejected."""
        for queue_names in ([], ["ab"], ["vault-register", "q"]):
            sample_send_request_data["queue_names"] = queue_names
            with pytest.raises(ValidationError, match="missing or invalid destination"):
                SendRequest(**sample_send_request_data)

    def test_delay_seconds_range(self, sample_send_request_data):
        for delay_seconds in (-1, 901):
            sample_send_request_data["delay_seconds"] = delay_seconds
            with pytest.raises(ValidationError):
                SendRequest(**sample_send_request_data)

    def test_message_attributes(self, sample_send_request_data):
        """Test attributes become String SQS message attributes."""
        request = SendRequest(**sample_send_request_data)

        assert request.message_attributes() == {
            'env': {'DataType': 'String', 'StringValue': 'prod'},
            'team': {'DataType': 'String', 'StringValue': 'core platform'},
        }

    def test_message_attributes_skip_empty_names(self, sample_send_request_data):
        """Test the empty key from a trailing comma is not sent."""
        sample_send_request_data["attributes"] = {"env": "prod", "": ""}
        request = SendRequest(**sample_send_request_data)

        assert list(request.message_attributes()) == ["env"]

    def test_message_attributes_skip_empty_values(self, sample_send_request_data):
        """Test a key given without a value is not sent."""
        sample_send_request_data["attributes"] = {"flag": "", "env": "prod"}
        request = SendRequest(**sample_send_request_data)

        assert request.message_attributes() == {
            'env': {'DataType': 'String', 'StringValue': 'prod'},
        }

    def test_body_required(self, sample_send_request_data):
        """Test a missing or empty message body is rejected."""
        sample_send_request_data["body"] = ""
        with pytest.raises(ValidationError, match="missing message body"):
            SendRequest(**sample_send_request_data)

        del sample_send_request_data["body"]
        with pytest.raises(ValidationError):
            SendRequest(**sample_send_request_data)
