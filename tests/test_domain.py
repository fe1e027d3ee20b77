"""Snapshot parsing, legacy schema rules and message formatting."""

from __future__ import annotations

import pytest

from notifier.application.use_cases.notifications.messages import (
    format_currency,
    format_rating,
    preview,
)
from notifier.domain.compat import (
    ReviewTarget,
    canonical_service_type,
    legacy_receiver_id,
    resolve_review_target,
)
from notifier.domain.entities import (
    Chat,
    EventKind,
    HandlerReport,
    Listing,
    Resolution,
    Review,
    ServiceRequest,
    TriggerEvent,
    WriteResult,
    status_changed,
)


def test_service_request_submitter_alias_order() -> None:
    request = ServiceRequest.from_snapshot(
        "r1",
        "construction",
        {"submitterId": "", "userId": "user", "clientId": "client", "budget": "12.5"},
    )

    assert request.submitter_id == "user"
    assert request.budget == 12.5
    assert request.is_assigned is False


def test_service_request_without_budget_formats_as_zero() -> None:
    request = ServiceRequest.from_snapshot("r1", "renovation", {"budget": "n/a"})

    assert format_currency(request.budget) == "Rs 0.00"


def test_status_change_is_textual() -> None:
    before = ServiceRequest.from_snapshot("r", "construction", {"status": "Pending"})
    same = ServiceRequest.from_snapshot("r", "construction", {"status": "Pending", "budget": 3})
    other = ServiceRequest.from_snapshot("r", "construction", {"status": "pending"})

    assert status_changed(before, same) is False
    assert status_changed(before, other) is True


def test_listing_and_review_aliases() -> None:
    assert Listing.from_snapshot("p", {"submitterId": "s", "userId": "u"}).owner_id == "u"
    assert Review.from_snapshot("r", {"reviewerId": "rev", "userId": "u"}).author_id == "rev"


def test_chat_receiver_by_elimination() -> None:
    chat = Chat(id="c", participants=["alice", "bob"])

    assert chat.other_participant("alice") == "bob"
    assert chat.other_participant("bob") == "alice"
    assert Chat(id="c", participants=["alice"]).other_participant("alice") is None


def test_canonical_service_type() -> None:
    assert canonical_service_type("construction") == "construction"
    assert canonical_service_type(" Renovation ") == "renovation"
    assert canonical_service_type("Renovation", accept_legacy=False) is None
    assert canonical_service_type("plumbing") is None
    assert canonical_service_type(None) is None


def test_review_target_resolution(caplog) -> None:
    assert resolve_review_target("construction").service_type == "construction"
    assert resolve_review_target("property") is None

    with caplog.at_level("INFO"):
        legacy = resolve_review_target("provider")
    assert legacy == ReviewTarget(service_type=None)
    assert "Legacy review target type" in caplog.text

    assert resolve_review_target("provider", accept_legacy=False) is None


def test_legacy_receiver_id_gated() -> None:
    assert legacy_receiver_id("bob") == "bob"
    assert legacy_receiver_id("bob", accept_legacy=False) is None
    assert legacy_receiver_id(None) is None


def test_trigger_event_path_parsing() -> None:
    event = TriggerEvent(
        event_kind="created", document_path="/chats/c1/messages/m1", after={"text": "hi"}
    )

    assert event.event_kind is EventKind.CREATED
    assert event.collection_group == "chats/messages"
    assert event.document_id == "m1"
    assert event.parent_id == "c1"
    assert TriggerEvent(event_kind="created", document_path="reviews/r1").parent_id is None


def test_trigger_event_validation() -> None:
    with pytest.raises(ValueError):
        TriggerEvent(event_kind="updated", document_path="reviews/r1", after={})
    with pytest.raises(ValueError):
        TriggerEvent(event_kind="created", document_path="reviews")
    with pytest.raises(ValueError):
        TriggerEvent(event_kind="deleted", document_path="reviews/r1")


def test_preview_truncates_at_fifty_characters() -> None:
    assert preview("a" * 50) == "a" * 50
    assert preview("a" * 51) == "a" * 50 + "..."
    assert preview("") == "New message"
    assert preview(None) == "New message"


def test_format_helpers() -> None:
    assert format_currency(1500) == "Rs 1,500.00"
    assert format_currency(1234567.891, "PKR") == "PKR 1,234,567.89"
    assert format_rating(4.0) == "4"
    assert format_rating(4.5) == "4.5"


def test_handler_report_collects_results() -> None:
    report = HandlerReport(handler="h", document_path="reviews/r1")
    report.add_resolution("resolve", Resolution(error="lookup failed"))
    report.add_writes(
        "write",
        [WriteResult(recipient_id="a", notification_id="n1"), WriteResult("b", error="boom")],
    )

    assert report.notified == ["a"]
    assert [(f.step, f.detail) for f in report.failures] == [
        ("resolve", "lookup failed"),
        ("write", "b: boom"),
    ]
    assert report.to_dict()["failures"][1] == {"step": "write", "detail": "b: boom"}
