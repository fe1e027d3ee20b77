"""Delivery channel sending transactional email via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any
from uuid import uuid4

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from .base import ChannelError, DeliveryChannel, DeliveryReceipt

logger = logging.getLogger(__name__)


class SendGridChannel(DeliveryChannel):
    """Channel A: SendGrid REST API."""

    name = "sendgrid"

    def __init__(self, api_key: str | None, sender: str | None) -> None:
        self.api_key = api_key
        self.sender = sender

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> "SendGridChannel":
        return cls(api_key=options.get("api_key"), sender=options.get("sender"))

    def is_configured(self) -> bool:
        return bool(self.api_key and self.sender)

    def send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> DeliveryReceipt:
        if not self.is_configured():
            raise ChannelError(self.name, "SendGrid configuration incomplete")

        message = Mail(
            from_email=self.sender,
            to_emails=to_address,
            subject=subject,
            html_content=html_body,
            plain_text_content=text_body,
        )

        try:
            response = SendGridAPIClient(self.api_key).send(message)
        except Exception as exc:
            # python-http-client raises HTTPError subclasses carrying the response
            raise self._failure(
                getattr(exc, "status_code", None),
                getattr(exc, "body", None),
                fallback=str(exc),
            ) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            raise self._failure(status_code, getattr(response, "body", None))

        message_id = self._message_id(response) or f"sendgrid-{uuid4().hex}"
        logger.info("SendGrid accepted email for %s (message id %s)", to_address, message_id)
        return DeliveryReceipt(channel=self.name, message_id=message_id)

    def _failure(
        self, status_code: Any, body: Any, *, fallback: str | None = None
    ) -> ChannelError:
        """Log and build the error for a rejected request.

        SendGrid answers with ``{"errors": [{"message": ..., "help": ...}]}``;
        each entry becomes ``message (help: link)``. Other bodies are reported
        as received.
        """

        details = self._error_details(body) or fallback or None
        description = "SendGrid API request failed"
        if status_code:
            description += f" with status {status_code}"
        if details:
            description += f": {details}"
        logger.error(description)
        return ChannelError(self.name, description)

    @staticmethod
    def _error_details(body: Any) -> str | None:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        if isinstance(body, str):
            body = body.strip()
            if not body:
                return None
            try:
                body = json.loads(body)
            except json.JSONDecodeError:
                return body

        if isinstance(body, dict):
            entries = []
            for item in body.get("errors") or []:
                if not isinstance(item, dict) or not item.get("message"):
                    continue
                entry = str(item["message"])
                if item.get("help"):
                    entry += f" (help: {item['help']})"
                entries.append(entry)
            return "; ".join(entries) if entries else json.dumps(body, default=str)
        if isinstance(body, list) and body:
            return "; ".join(str(item) for item in body)
        return None

    @staticmethod
    def _message_id(response: Any) -> str | None:
        headers = getattr(response, "headers", None) or {}
        try:
            value = headers.get("X-Message-Id")
        except AttributeError:
            return None
        return str(value) if value else None


__all__ = ["SendGridChannel"]
