"""
Package: sqs_util
Description: Command-line utility for sending a message to named SQS queues.

Resolves each queue name to its URL and sends a single message,
optionally with string message attributes given as an option string.
"""

from sqs_util.version import __version__

__all__ = ['__version__']
