"""
Module: sqs.py
Description: SQS client for resolving queues and sending messages.

Resolves a queue name to its URL and sends a message to it. Failures
are logged with the AWS error code and re-raised; nothing is retried.
"""

from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from sqs_util.models.message import SendRequest, SendResult
from sqs_util.utils.logger import get_logger

logger = get_logger(__name__)


class SQSClient:
    """
    SQS client for queue lookup and message delivery.

    Wraps a boto3 SQS client for a single region. Credentials come
    from the standard boto3 credential chain.
    """

    def __init__(self, region: str):
        """
        Initialize SQS client.

        Args:
            region: AWS region of the queues

        Raises:
            ValueError: If region is invalid
        """
        if not region or not isinstance(region, str):
            raise ValueError("region must be a non-empty string")

        self.region = region
        self.sqs = boto3.client('sqs', region_name=region)

        logger.debug(
            "SQS client initialized",
            region=region
        )

    def get_queue_url(self, queue_name: str, account_id: Optional[str] = None) -> str:
        """
        Resolve a queue name to its queue URL.

        Args:
            queue_name: Name of the queue
            account_id: Optional AWS account number owning the queue

        Returns:
            Queue URL from SQS

        Raises:
            ClientError: If the queue does not exist or SQS operation fails
            ValueError: If queue_name is invalid
        """
        if not queue_name or not isinstance(queue_name, str):
            raise ValueError("queue_name must be a non-empty string")

        params = {'QueueName': queue_name}
        if account_id:
            params['QueueOwnerAWSAccountId'] = account_id

        try:
            response = self.sqs.get_queue_url(**params)
        except ClientError as e:
            logger.error(
                "Failed to resolve queue URL",
                queue_name=queue_name,
                account_id=account_id,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        queue_url = response['QueueUrl']
        logger.debug(
            "Queue URL resolved",
            queue_name=queue_name,
            queue_url=queue_url
        )
        return queue_url

    def send_message(
        self,
        queue_url: str,
        body: str,
        message_attributes: Optional[Dict[str, Dict[str, Any]]] = None,
        delay_seconds: int = 0
    ) -> str:
        """
        Send a message to an SQS queue.

        Args:
            queue_url: URL of the SQS queue
            body: Message body
            message_attributes: Optional SQS MessageAttributes parameter
            delay_seconds: Delay before message becomes available

        Returns:
            Message ID from SQS

        Raises:
            ClientError: If SQS operation fails
            ValueError: If queue_url is invalid
        """
        if not queue_url or not isinstance(queue_url, str):
            raise ValueError("queue_url must be a non-empty string")

        params = {
            'QueueUrl': queue_url,
            'MessageBody': body,
            'DelaySeconds': delay_seconds
        }
        if message_attributes:
            params['MessageAttributes'] = message_attributes

        try:
            response = self.sqs.send_message(**params)
        except ClientError as e:
            logger.error(
                "Failed to send message to SQS",
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        logger.debug("SendMessage response", response=response)

        message_id = response['MessageId']
        logger.info(
            "Message sent to SQS",
            message_id=message_id,
            queue_url=queue_url
        )
        return message_id


def send(request: SendRequest, client: Optional[SQSClient] = None) -> List[SendResult]:
    """
    Deliver the request's message to each of its queues in order.

    The first failing lookup or send aborts the remaining queues.

    Args:
        request: Validated send request
        client: Optional SQS client; one for request.region is created if omitted

    Returns:
        One SendResult per queue

    Raises:
        ClientError: If a lookup or send fails
    """
    if client is None:
        client = SQSClient(region=request.region)

    message_attributes = request.message_attributes()
    logger.debug(
        "Creating message input",
        body_length=len(request.body),
        attribute_count=len(message_attributes),
        delay_seconds=request.delay_seconds
    )

    results = []
    for queue_name in request.queue_names:
        queue_url = client.get_queue_url(queue_name, account_id=request.account_id)
        message_id = client.send_message(
            queue_url,
            request.body,
            message_attributes=message_attributes,
            delay_seconds=request.delay_seconds
        )
        results.append(SendResult(
            queue_name=queue_name,
            queue_url=queue_url,
            message_id=message_id
        ))

    return results
