"""
Module: request.py
Description: Normalized send request model.

Defines SendRequest, the validated output of the request builder and
the only input the submission client accepts. Optional fields are
None when not supplied and are left out of the SQS call entirely.

Dependencies: pydantic, typing
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict

from sqs_sender.models.attribute import AttributeValue


class SendRequest(BaseModel):
    """
    Validated request for a single SendMessage call.

    Attributes:
        queue_url: Target queue URL
        message_body: Message body
        delay_seconds: Delivery delay, only set when greater than zero
        message_attributes: Parsed message attributes (max 10)
        message_system_attributes: Parsed system attributes (max 10)
        message_group_id: FIFO message group ID
        message_deduplication_id: FIFO deduplication ID
    """

    model_config = ConfigDict(frozen=True)

    queue_url: str
    message_body: str
    delay_seconds: Optional[int] = Field(default=None, gt=0, le=900)
    message_attributes: Optional[Dict[str, AttributeValue]] = Field(
        default=None,
        max_length=10
    )
    message_system_attributes: Optional[Dict[str, AttributeValue]] = Field(
        default=None,
        max_length=10
    )
    message_group_id: Optional[str] = None
    message_deduplication_id: Optional[str] = None

    def to_sqs_kwargs(self) -> Dict[str, Any]:
        """
        Build keyword arguments for the SQS send_message call.

        Returns:
            Dictionary of SendMessage parameters with unset fields omitted
        """
        kwargs: Dict[str, Any] = {
            'QueueUrl': self.queue_url,
            'MessageBody': self.message_body,
        }

        if self.delay_seconds is not None:
            kwargs['DelaySeconds'] = self.delay_seconds
        if self.message_attributes is not None:
            kwargs['MessageAttributes'] = {
                name: value.to_sqs() for name, value in self.message_attributes.items()
            }
        if self.message_system_attributes is not None:
            kwargs['MessageSystemAttributes'] = {
                name: value.to_sqs() for name, value in self.message_system_attributes.items()
            }
        if self.message_group_id is not None:
            kwargs['MessageGroupId'] = self.message_group_id
        if self.message_deduplication_id is not None:
            kwargs['MessageDeduplicationId'] = self.message_deduplication_id

        return kwargs
