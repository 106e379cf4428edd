"""
Package: sqs_queue
Description: SQS submission for validated send requests.

Provides the MessageSubmitter seam and its aioboto3 implementation.
"""

from .sqs import MessageSubmitter, SQSSubmitter

__all__ = ["MessageSubmitter", "SQSSubmitter"]
