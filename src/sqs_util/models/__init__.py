"""
Package: models
Description: Pydantic models for sqs_util.
"""

from .message import SendRequest, SendResult

__all__ = ['SendRequest', 'SendResult']
