"""Confirmation email delivery channels and the fallback chain."""

from .base import (
    ChannelDescriptor,
    ChannelError,
    DeliveryChannel,
    DeliveryReceipt,
    OutgoingEmail,
)
from .chain import (
    ChainOutcome,
    ChannelAttempt,
    DeliveryChannelChain,
    NO_CHANNELS_CONFIGURED,
    build_delivery_chain,
    descriptors_from_settings,
)
from .sendgrid_channel import SendGridChannel
from .ses_channel import SesChannel
from .smtp_channel import SmtpChannel

__all__ = [
    "ChainOutcome",
    "ChannelAttempt",
    "ChannelDescriptor",
    "ChannelError",
    "DeliveryChannel",
    "DeliveryChannelChain",
    "DeliveryReceipt",
    "NO_CHANNELS_CONFIGURED",
    "OutgoingEmail",
    "SendGridChannel",
    "SesChannel",
    "SmtpChannel",
    "build_delivery_chain",
    "descriptors_from_settings",
]
