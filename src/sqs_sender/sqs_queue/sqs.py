"""
Module: sqs.py
Description: SQS submission client.

Sends a validated SendRequest to SQS through aioboto3 and maps the
response to a SendResult. SDK failures are wrapped in TransportError
so the caller handles every failure through one error type.
"""

from typing import Optional, Protocol

from aioboto3 import Session
from botocore.exceptions import BotoCoreError, ClientError

from sqs_sender.errors import TransportError
from sqs_sender.models.request import SendRequest
from sqs_sender.models.result import SendResult
from sqs_sender.utils.logger import get_logger

logger = get_logger(__name__)


class MessageSubmitter(Protocol):
    """Anything that can submit one SendRequest."""

    async def submit(self, request: SendRequest) -> SendResult:
        """
        Submit the request.

        Returns:
            Successful SendResult

        Raises:
            TransportError: If the message could not be sent
        """
        ...


class SQSSubmitter:
    """
    aioboto3-backed submitter for SQS SendMessage.

    Credentials are resolved by the SDK's default chain.
    """

    def __init__(
        self,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        session: Optional[Session] = None
    ):
        """
        Initialize SQS submitter.

        Args:
            region_name: AWS region, None to let the SDK resolve it
            endpoint_url: Optional endpoint override
            session: Optional aioboto3 session to reuse
        """
        self.region_name = region_name
        self.endpoint_url = endpoint_url
        self.session = session or Session()

        logger.info(
            "SQS submitter initialized",
            region_name=region_name,
            endpoint_url=endpoint_url
        )

    async def submit(self, request: SendRequest) -> SendResult:
        """
        Send the message to SQS.

        Args:
            request: Validated SendMessage request

        Returns:
            SendResult with the identifiers SQS returned

        Raises:
            TransportError: If SQS rejects the call or it cannot be made
        """
        try:
            async with self.session.client(
                'sqs',
                region_name=self.region_name,
                endpoint_url=self.endpoint_url
            ) as sqs:
                response = await sqs.send_message(**request.to_sqs_kwargs())

        except ClientError as e:
            error_code = e.response['Error'].get('Code')
            error_message = e.response['Error'].get('Message') or str(e)
            logger.error(
                "Failed to send message to SQS",
                queue_url=request.queue_url,
                error_code=error_code,
                error_message=error_message
            )
            raise TransportError(error_message, error_code=error_code) from e

        except BotoCoreError as e:
            logger.error(
                "Unexpected error sending message to SQS",
                queue_url=request.queue_url,
                error=str(e)
            )
            raise TransportError(str(e) or "Failed to send message") from e

        result = SendResult(
            success=True,
            message_id=response['MessageId'],
            sequence_number=response.get('SequenceNumber'),
            md5_of_body=response.get('MD5OfMessageBody'),
            md5_of_attributes=response.get('MD5OfMessageAttributes')
        )

        logger.info(
            "Message sent to SQS",
            message_id=result.message_id,
            sequence_number=result.sequence_number,
            queue_url=request.queue_url
        )

        return result
