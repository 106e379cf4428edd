"""
Module: message.py
Description: Message configuration model for a single send.

Defines MessageConfig, the immutable record handed from the input
loader to the request builder. It holds the caller's inputs as given:
attribute maps stay raw JSON text until the builder parses them.

Dependencies: pydantic, typing
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class MessageConfig(BaseModel):
    """
    Caller-supplied configuration for one SQS send.

    Attributes:
        queue_url: Target queue URL
        message_body: Message body text
        message_attributes: Optional message attributes as raw JSON text
        delay_seconds: Optional delivery delay in seconds
        message_group_id: Optional FIFO message group ID
        message_deduplication_id: Optional FIFO deduplication ID
        system_attributes: Optional system attributes as raw JSON text
    """

    model_config = ConfigDict(frozen=True)

    queue_url: str = Field(
        ...,
        description="Target SQS queue URL"
    )
    message_body: str = Field(
        ...,
        description="Message body"
    )
    message_attributes: Optional[str] = Field(
        default=None,
        description="Message attributes as JSON text"
    )
    delay_seconds: Optional[int] = Field(
        default=None,
        description="Delivery delay in seconds"
    )
    message_group_id: Optional[str] = Field(
        default=None,
        description="Message group ID (FIFO queues)"
    )
    message_deduplication_id: Optional[str] = Field(
        default=None,
        description="Message deduplication ID (FIFO queues)"
    )
    system_attributes: Optional[str] = Field(
        default=None,
        description="Message system attributes as JSON text"
    )

    @property
    def is_fifo(self) -> bool:
        """True when the queue URL names a FIFO queue."""
        return self.queue_url.endswith(".fifo")
