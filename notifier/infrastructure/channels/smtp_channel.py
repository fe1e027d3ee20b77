"""Delivery channel sending email through an SMTP relay."""

from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import make_msgid
from typing import Any

from .base import ChannelError, DeliveryChannel, DeliveryReceipt

logger = logging.getLogger(__name__)


class SmtpChannel(DeliveryChannel):
    """Channel B: any SMTP server, STARTTLS by default."""

    name = "smtp"

    def __init__(
        self,
        host: str | None,
        sender: str | None,
        *,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 30,
    ) -> None:
        self.host = host
        self.sender = sender
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> "SmtpChannel":
        return cls(
            host=options.get("host"),
            sender=options.get("sender"),
            port=int(options.get("port") or 587),
            username=options.get("username"),
            password=options.get("password"),
            use_tls=bool(options.get("use_tls", True)),
        )

    def is_configured(self) -> bool:
        return bool(self.host and self.sender)

    def _build_message(
        self, to_address: str, subject: str, html_body: str, text_body: str | None
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to_address
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(text_body or "")
        message.add_alternative(html_body, subtype="html")
        return message

    def send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> DeliveryReceipt:
        if not self.is_configured():
            raise ChannelError(self.name, "SMTP not configured (missing host or sender)")

        message = self._build_message(to_address, subject, html_body, text_body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls(context=ssl.create_default_context())
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(message)
        except smtplib.SMTPAuthenticationError as exc:
            logger.error("SMTP authentication failed: %s", exc)
            raise ChannelError(self.name, f"SMTP authentication failed: {exc}") from exc
        except smtplib.SMTPRecipientsRefused as exc:
            logger.error("SMTP recipients refused: %s", exc)
            raise ChannelError(self.name, f"Recipients refused: {exc}") from exc
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP error: %s", exc)
            raise ChannelError(self.name, str(exc) or exc.__class__.__name__) from exc

        message_id = str(message["Message-ID"])
        logger.info("SMTP relay accepted email for %s (message id %s)", to_address, message_id)
        return DeliveryReceipt(channel=self.name, message_id=message_id)


__all__ = ["SmtpChannel"]
