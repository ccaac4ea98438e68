"""
Package: sqs_queue
Description: SQS operations for message delivery.

Provides a boto3 client that resolves queue names to URLs and sends
messages to them.
"""

from sqs_util.sqs_queue.sqs import SQSClient, send

__all__ = ['SQSClient', 'send']
