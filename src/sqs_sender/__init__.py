"""
Package: sqs_sender
Description: Validate and send a single message to an SQS queue.

Checks queue URL shape, body size, delay bounds, FIFO requirements and
attribute schema before making one SendMessage call, then reports the
returned identifiers as step outputs.
"""

__version__ = "1.0.0"
