"""Ordered chain of delivery channels tried until one succeeds."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from anyio import to_thread

from notifier.config import Settings

from .base import ChannelDescriptor, DeliveryChannel, OutgoingEmail
from .sendgrid_channel import SendGridChannel
from .ses_channel import SesChannel
from .smtp_channel import SmtpChannel

logger = logging.getLogger(__name__)

NO_CHANNELS_CONFIGURED = "No delivery channels configured"

CHANNEL_FACTORIES: dict[str, Callable[[dict[str, Any]], DeliveryChannel]] = {
    SendGridChannel.name: SendGridChannel.from_options,
    SmtpChannel.name: SmtpChannel.from_options,
    SesChannel.name: SesChannel.from_options,
}


@dataclass
class ChannelAttempt:
    channel: str
    success: bool
    message_id: str | None = None
    error: str | None = None
    skipped: bool = False


@dataclass
class ChainOutcome:
    """Result of running the chain; ``error`` holds the last failure text."""

    success: bool
    channel: str | None = None
    message_id: str | None = None
    error: str | None = None
    attempts: list[ChannelAttempt] = field(default_factory=list)


class DeliveryChannelChain:
    """Try each channel in order; the first success wins.

    The chain keeps no state between calls.
    """

    def __init__(self, channels: Sequence[DeliveryChannel]) -> None:
        self._channels = list(channels)

    @property
    def channel_names(self) -> list[str]:
        return [channel.name for channel in self._channels]

    async def deliver(self, email: OutgoingEmail) -> ChainOutcome:
        attempts: list[ChannelAttempt] = []
        last_error: str | None = None

        for channel in self._channels:
            if not channel.is_configured():
                logger.info("Channel %s not configured; skipping", channel.name)
                attempts.append(
                    ChannelAttempt(
                        channel=channel.name,
                        success=False,
                        error="not configured",
                        skipped=True,
                    )
                )
                continue

            send = functools.partial(
                channel.send,
                email.to_address,
                email.subject,
                email.html_body,
                email.text_body,
            )
            try:
                receipt = await to_thread.run_sync(send)
            except Exception as exc:
                last_error = str(exc) or exc.__class__.__name__
                logger.warning(
                    "Channel %s failed for %s: %s", channel.name, email.to_address, last_error
                )
                attempts.append(
                    ChannelAttempt(channel=channel.name, success=False, error=last_error)
                )
                continue

            attempts.append(
                ChannelAttempt(
                    channel=channel.name, success=True, message_id=receipt.message_id
                )
            )
            return ChainOutcome(
                success=True,
                channel=channel.name,
                message_id=receipt.message_id,
                attempts=attempts,
            )

        return ChainOutcome(
            success=False,
            error=last_error or NO_CHANNELS_CONFIGURED,
            attempts=attempts,
        )


def build_delivery_chain(descriptors: Sequence[ChannelDescriptor]) -> DeliveryChannelChain:
    """Instantiate the channels described by ``descriptors``, keeping their order."""

    channels: list[DeliveryChannel] = []
    for descriptor in descriptors:
        factory = CHANNEL_FACTORIES.get(descriptor.kind.lower())
        if factory is None:
            msg = f"Unknown delivery channel: {descriptor.kind}"
            raise ValueError(msg)
        channels.append(factory(dict(descriptor.options)))
    return DeliveryChannelChain(channels)


def descriptors_from_settings(settings: Settings) -> list[ChannelDescriptor]:
    """Translate application settings into the ordered descriptor list."""

    options: dict[str, dict[str, Any]] = {
        SendGridChannel.name: {
            "api_key": settings.sendgrid_api_key,
            "sender": settings.sendgrid_sender,
        },
        SmtpChannel.name: {
            "host": settings.smtp_host,
            "port": settings.smtp_port,
            "username": settings.smtp_username,
            "password": settings.smtp_password,
            "use_tls": settings.smtp_use_tls,
            "sender": settings.smtp_sender,
        },
        SesChannel.name: {
            "region": settings.ses_region,
            "sender": settings.ses_sender,
        },
    }
    return [
        ChannelDescriptor(kind=name, options=options.get(name, {}))
        for name in settings.delivery_channel_order()
    ]


__all__ = [
    "CHANNEL_FACTORIES",
    "ChainOutcome",
    "ChannelAttempt",
    "DeliveryChannelChain",
    "NO_CHANNELS_CONFIGURED",
    "build_delivery_chain",
    "descriptors_from_settings",
]
