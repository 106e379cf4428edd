"""
Module: validation
Description: Validation and request building for SQS sends.

Turns a MessageConfig into a SendRequest, rejecting anything SQS
would refuse before a network call is made.
"""

from .attributes import parse_attributes, serialize_attributes
from .builder import (
    build_request,
    validate_delay_seconds,
    validate_fifo_queue,
    validate_message_body,
    validate_queue_url,
)

__all__ = [
    "build_request",
    "parse_attributes",
    "serialize_attributes",
    "validate_delay_seconds",
    "validate_fifo_queue",
    "validate_message_body",
    "validate_queue_url",
]
