"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models passed between the sender's
components:
- MessageConfig: Caller inputs for a single send
- AttributeValue: Typed attribute value
- SendRequest: Validated SendMessage request
- SendResult: Outcome of the send

All models are exported here for convenient importing.
"""

from .attribute import AttributeValue
from .message import MessageConfig
from .request import SendRequest
from .result import SendResult

__all__ = [
    "AttributeValue",
    "MessageConfig",
    "SendRequest",
    "SendResult",
]
