"""Ordering and fallback behaviour of the delivery channel chain."""

from __future__ import annotations

import asyncio

import pytest

from notifier.config import Settings
from notifier.infrastructure.channels import (
    NO_CHANNELS_CONFIGURED,
    ChannelDescriptor,
    DeliveryChannelChain,
    OutgoingEmail,
    SendGridChannel,
    SesChannel,
    SmtpChannel,
    build_delivery_chain,
    descriptors_from_settings,
)

from conftest import ScriptedChannel

EMAIL = OutgoingEmail(to_address="user@example.com", subject="Hi", html_body="<p>Hi</p>")


def test_first_success_wins_and_later_channels_are_not_tried() -> None:
    first = ScriptedChannel("a", message_id="a-1")
    second = ScriptedChannel("b", message_id="b-1")

    outcome = asyncio.run(DeliveryChannelChain([first, second]).deliver(EMAIL))

    assert outcome.success is True
    assert (outcome.channel, outcome.message_id) == ("a", "a-1")
    assert second.sent == []


def test_fail_fail_success_uses_third_channel() -> None:
    chain = DeliveryChannelChain(
        [
            ScriptedChannel("a", error="boom"),
            ScriptedChannel("b", error="bang"),
            ScriptedChannel("c", message_id="c-3"),
        ]
    )

    outcome = asyncio.run(chain.deliver(EMAIL))

    assert outcome.success is True
    assert outcome.message_id == "c-3"
    assert [attempt.success for attempt in outcome.attempts] == [False, False, True]


def test_all_failures_report_last_error() -> None:
    chain = DeliveryChannelChain(
        [
            ScriptedChannel("a", error="boom"),
            ScriptedChannel("b", error="bang"),
            ScriptedChannel("c", error="crash"),
        ]
    )

    outcome = asyncio.run(chain.deliver(EMAIL))

    assert outcome.success is False
    assert outcome.error == "c: crash"
    assert outcome.message_id is None


def test_unconfigured_channels_are_skipped() -> None:
    skipped = ScriptedChannel("a", configured=False)
    chain = DeliveryChannelChain([skipped, ScriptedChannel("b", message_id="b-1")])

    outcome = asyncio.run(chain.deliver(EMAIL))

    assert outcome.channel == "b"
    assert skipped.sent == []
    assert outcome.attempts[0].skipped is True


def test_no_configured_channels() -> None:
    chain = DeliveryChannelChain([ScriptedChannel("a", configured=False)])

    outcome = asyncio.run(chain.deliver(EMAIL))

    assert outcome.success is False
    assert outcome.error == NO_CHANNELS_CONFIGURED


def test_same_inputs_give_same_outcome() -> None:
    chain = DeliveryChannelChain(
        [ScriptedChannel("a", error="boom"), ScriptedChannel("b", message_id="b-1")]
    )

    first = asyncio.run(chain.deliver(EMAIL))
    second = asyncio.run(chain.deliver(EMAIL))

    assert first == second


def test_build_chain_keeps_descriptor_order() -> None:
    chain = build_delivery_chain(
        [
            ChannelDescriptor(kind="ses", options={"region": "eu-west-1", "sender": "s@x.io"}),
            ChannelDescriptor(kind="SMTP", options={"host": "mail", "sender": "s@x.io"}),
        ]
    )

    assert chain.channel_names == ["ses", "smtp"]


def test_build_chain_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        build_delivery_chain([ChannelDescriptor(kind="pigeon")])


def test_descriptors_follow_configured_order() -> None:
    settings = Settings(
        _env_file=None,
        delivery_channels=" SMTP , sendgrid ",
        smtp_host="smtp.example.com",
        smtp_sender="noreply@example.com",
        sendgrid_api_key="SG.fake",
        sendgrid_sender="noreply@example.com",
    )

    descriptors = descriptors_from_settings(settings)
    chain = build_delivery_chain(descriptors)

    assert [descriptor.kind for descriptor in descriptors] == ["smtp", "sendgrid"]
    assert descriptors[0].options["host"] == "smtp.example.com"
    assert chain.channel_names == [SmtpChannel.name, SendGridChannel.name]


def test_channels_without_configuration_are_unavailable() -> None:
    assert SendGridChannel(api_key=None, sender="a@b.co").is_configured() is False
    assert SmtpChannel(host=None, sender="a@b.co").is_configured() is False
    assert SesChannel(region="us-east-1", sender=None).is_configured() is False
