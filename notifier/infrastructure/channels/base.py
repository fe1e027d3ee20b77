"""Common contract shared by every confirmation email channel."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class ChannelError(Exception):
    """Raised by a channel when a message could not be handed over."""

    def __init__(self, channel: str, message: str) -> None:
        super().__init__(message)
        self.channel = channel

    def __str__(self) -> str:
        return f"{self.channel}: {self.args[0]}"


@dataclass(frozen=True)
class OutgoingEmail:
    to_address: str
    subject: str
    html_body: str
    text_body: str | None = None


@dataclass(frozen=True)
class DeliveryReceipt:
    channel: str
    message_id: str


@dataclass(frozen=True)
class ChannelDescriptor:
    """Explicit configuration for one channel of the chain."""

    kind: str
    options: dict[str, Any] = field(default_factory=dict)


class DeliveryChannel(ABC):
    """One external sender; missing configuration means "skip to the next one"."""

    name: str = "channel"

    @abstractmethod
    def is_configured(self) -> bool:
        """Return ``True`` when the channel has everything it needs to send."""

    @abstractmethod
    def send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> DeliveryReceipt:
        """Send one email and return its message id, or raise :class:`ChannelError`."""


__all__ = [
    "ChannelDescriptor",
    "ChannelError",
    "DeliveryChannel",
    "DeliveryReceipt",
    "OutgoingEmail",
]
