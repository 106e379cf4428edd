"""
Module: result.py
Description: Outcome of a send attempt.

Defines SendResult, which holds either the identifiers returned by SQS
or the failure description with its error kind, never both.

Dependencies: pydantic, typing
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

from sqs_sender.errors import ErrorKind, SendMessageError


class SendResult(BaseModel):
    """
    Result of a single send.

    Attributes:
        success: Whether the message was accepted by the queue
        message_id: Provider-assigned message ID
        sequence_number: Sequence number (FIFO queues only)
        md5_of_body: MD5 digest of the message body
        md5_of_attributes: MD5 digest of the message attributes, if any were sent
        error: Human-readable failure description
        error_kind: Tagged kind of the failure
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    message_id: Optional[str] = None
    sequence_number: Optional[str] = None
    md5_of_body: Optional[str] = None
    md5_of_attributes: Optional[str] = None
    error: Optional[str] = Field(default=None, min_length=1)
    error_kind: Optional[ErrorKind] = None

    @model_validator(mode='after')
    def validate_exclusive_fields(self) -> 'SendResult':
        """Keep success fields and failure fields mutually exclusive."""
        success_fields = (
            self.message_id,
            self.sequence_number,
            self.md5_of_body,
            self.md5_of_attributes,
        )
        if self.success:
            if self.error is not None or self.error_kind is not None:
                raise ValueError("successful results cannot carry an error")
            if self.message_id is None:
                raise ValueError("successful results require message_id")
        else:
            if self.error is None or self.error_kind is None:
                raise ValueError("failed results require error and error_kind")
            if any(field is not None for field in success_fields):
                raise ValueError("failed results cannot carry success fields")
        return self

    @classmethod
    def failure(cls, exc: SendMessageError) -> 'SendResult':
        """Build a failed result from a raised error."""
        return cls(success=False, error=exc.message, error_kind=exc.kind)
