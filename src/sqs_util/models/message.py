"""
Module: message.py
Description: Message send request models for sqs_util.

Validates the command-line input before any AWS call is made and
converts option-string attributes into SQS message attributes.

Key Components:
- SendRequest: validated account, region, queues, body and attributes
- SendResult: outcome of delivering the message to one queue

Dependencies: pydantic, typing
Author: sqs_util Team
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sqs_util.utils.logger import get_logger

logger = get_logger(__name__)

ACCOUNT_ID_MIN_LENGTH = 12
QUEUE_NAME_MIN_LENGTH = 3


class SendRequest(BaseModel):
    """
    A single message to deliver to one or more named queues.

    Attributes:
        account_id: AWS account number owning the queues
        region: AWS region of the queues
        queue_names: Names of the destination queues, in delivery order
        body: Literal message body
        attributes: String message attributes keyed by name
        delay_seconds: Delay before the message becomes visible
    """

    model_config = ConfigDict(validate_assignment=True)

    account_id: str = Field(..., description="AWS account number")
    region: str = Field(..., min_length=1, description="AWS region")
    queue_names: List[str] = Field(..., description="Destination queue names")
    body: str = Field(..., description="Message body")
    attributes: Dict[str, str] = Field(
        default_factory=dict,
        description="String message attributes"
    )
    delay_seconds: int = Field(
        default=1,
        ge=0,
        le=900,
        description="Delivery delay in seconds"
    )

    @field_validator('account_id')
    @classmethod
    def validate_account_id(cls, v: str) -> str:
        """Validate the account number is present and long enough."""
        if len(v) < ACCOUNT_ID_MIN_LENGTH:
            raise ValueError(
                "missing or invalid account length: "
                f"--account='123456789012', received: '{v}'"
            )
        return v

    @field_validator('queue_names')
    @classmethod
    def validate_queue_names(cls, v: List[str]) -> List[str]:
        """Validate at least one queue is given and every name is long enough."""
        if not v or any(len(name) < QUEUE_NAME_MIN_LENGTH for name in v):
            raise ValueError(
                "missing or invalid destination(s): "
                f"--queue='some-fancy-queue', received: '{' '.join(v)}'"
            )
        return v

    @field_validator('body')
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Validate the message body is not empty."""
        if not v:
            raise ValueError("missing message body: --message='hello', received: ''")
        return v

    def message_attributes(self) -> Dict[str, Dict[str, Any]]:
        """
        Build the SQS MessageAttributes parameter from attributes.

        SQS rejects empty names and empty String values, so entries
        with either are skipped.

        Returns:
            Dictionary of attribute name to SQS attribute value
        """
        message_attributes = {}
        for name, value in self.attributes.items():
            if not name:
                logger.debug("Skipping message attribute without a name", value=value)
                continue
            if not value:
                logger.debug("Skipping message attribute without a value", name=name)
                continue
            message_attributes[name] = {
                'DataType': 'String',
                'StringValue': value
            }
        return message_attributes


class SendResult(BaseModel):
    """Outcome of sending the message to one queue."""

    queue_name: str
    queue_url: str
    message_id: str
