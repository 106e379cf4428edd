"""
Module: errors.py
Description: Error taxonomy for message validation and submission.

Every failure raised by the sender derives from SendMessageError and
carries an ErrorKind tag, so callers can branch on the kind of failure
rather than on message text.

Key Components:
- ErrorKind: Enum of failure kinds
- SendMessageError: Base exception with kind tag
- One subclass per kind, plus MissingAttributeValueError
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure a send can end with."""

    FORMAT = "FormatError"
    SIZE_LIMIT = "SizeLimitError"
    RANGE = "RangeError"
    MISSING_REQUIRED_FIELD = "MissingRequiredFieldError"
    SCHEMA = "SchemaError"
    DECODE = "DecodeError"
    TRANSPORT = "TransportError"


class SendMessageError(Exception):
    """Base class for all validation and submission failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FormatError(SendMessageError):
    """Malformed queue URL or non-numeric delay text."""

    kind = ErrorKind.FORMAT


class SizeLimitError(SendMessageError):
    """Message body exceeds the byte cap."""

    kind = ErrorKind.SIZE_LIMIT


class RangeError(SendMessageError):
    """Delay outside the accepted range."""

    kind = ErrorKind.RANGE


class MissingRequiredFieldError(SendMessageError):
    """A required input or field was not supplied."""

    kind = ErrorKind.MISSING_REQUIRED_FIELD


class SchemaError(SendMessageError):
    """Attribute JSON does not follow the attribute schema."""

    kind = ErrorKind.SCHEMA


class MissingAttributeValueError(SchemaError, MissingRequiredFieldError):
    """Attribute entry lacks the StringValue/BinaryValue its DataType requires."""

    kind = ErrorKind.MISSING_REQUIRED_FIELD


class DecodeError(SendMessageError):
    """BinaryValue is not valid base64."""

    kind = ErrorKind.DECODE


class TransportError(SendMessageError):
    """
    Failure reported by the queue provider or the network layer.

    Attributes:
        error_code: Provider error code (e.g. 'AWS.SimpleQueueService.NonExistentQueue'),
            None for network-level failures
    """

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code
