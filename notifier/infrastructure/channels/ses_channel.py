"""Delivery channel sending email through Amazon SES."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base import ChannelError, DeliveryChannel, DeliveryReceipt

logger = logging.getLogger(__name__)


class SesChannel(DeliveryChannel):
    """Channel C: Amazon Simple Email Service."""

    name = "ses"

    def __init__(self, region: str | None, sender: str | None) -> None:
        self.region = region
        self.sender = sender
        self._client = None

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> "SesChannel":
        return cls(region=options.get("region"), sender=options.get("sender"))

    def is_configured(self) -> bool:
        return bool(self.region and self.sender)

    def _get_client(self):
        if self._client is None:
            self._client = boto3.client("ses", region_name=self.region)
        return self._client

    def send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> DeliveryReceipt:
        if not self.is_configured():
            raise ChannelError(self.name, "Amazon SES not configured (missing region or sender)")

        body: dict[str, Any] = {"Html": {"Data": html_body, "Charset": "UTF-8"}}
        if text_body:
            body["Text"] = {"Data": text_body, "Charset": "UTF-8"}

        try:
            response = self._get_client().send_email(
                Source=self.sender,
                Destination={"ToAddresses": [to_address]},
                Message={
                    "Subject": {"Data": subject, "Charset": "UTF-8"},
                    "Body": body,
                },
            )
        except ClientError as exc:
            error = exc.response.get("Error", {})
            description = f"{error.get('Code', 'ClientError')}: {error.get('Message', exc)}"
            logger.error("SES send error: %s", description)
            raise ChannelError(self.name, description) from exc
        except BotoCoreError as exc:
            logger.error("SES send error: %s", exc)
            raise ChannelError(self.name, str(exc)) from exc

        message_id = response.get("MessageId")
        if not message_id:
            raise ChannelError(self.name, "SES response did not include a MessageId")
        logger.info("SES accepted email for %s (message id %s)", to_address, message_id)
        return DeliveryReceipt(channel=self.name, message_id=message_id)


__all__ = ["SesChannel"]
