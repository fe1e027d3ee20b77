"""Behaviour of the handlers that create in-app notifications."""

from __future__ import annotations

import asyncio

from notifier.application.use_cases.notifications import (
    on_chat_message_created,
    on_listing_created,
    on_review_created,
    on_service_request_created,
    on_service_request_updated,
    on_support_chat_message_created,
    on_support_message_created,
)
from notifier.domain.entities import EventKind, NotificationCategory, TriggerEvent


def _created(path: str, after: dict) -> TriggerEvent:
    return TriggerEvent(event_kind=EventKind.CREATED, document_path=path, after=after)


def _updated(path: str, before: dict, after: dict) -> TriggerEvent:
    return TriggerEvent(
        event_kind=EventKind.UPDATED, document_path=path, before=before, after=after
    )


def test_listing_notifies_admins_and_owner(context, seed, notifications_for) -> None:
    seed.admin("admin-1")
    seed.admin("admin-2")

    report = asyncio.run(
        on_listing_created(
            context, _created("properties/p1", {"title": "Sea View", "userId": "owner-1"})
        )
    )

    assert sorted(report.notified) == ["admin-1", "admin-2", "owner-1"]
    assert report.failures == []

    admin_note = notifications_for("admin-1")[0]
    assert admin_note.title == "New Property Listed"
    assert admin_note.message == (
        'A new property "Sea View" has been listed and is pending approval.'
    )
    assert admin_note.link == "/admin"
    assert admin_note.read is False

    owner_note = notifications_for("owner-1")[0]
    assert owner_note.title == "Property Listed Successfully"
    assert owner_note.category is NotificationCategory.STATUS_UPDATE
    assert owner_note.link == "/properties/p1"


def test_listing_without_title_uses_placeholder(context, seed, notifications_for) -> None:
    seed.admin("admin-1")

    asyncio.run(on_listing_created(context, _created("properties/p2", {"ownerId": "o"})))

    assert '"Untitled"' in notifications_for("admin-1")[0].message


def test_assigned_request_notifies_submitter_and_provider(
    context, seed, notifications_for
) -> None:
    seed.provider("prov-1", user_id="prov-user", service_type="construction")

    report = asyncio.run(
        on_service_request_created(
            context,
            _created(
                "constructionProjects/r1",
                {"clientId": "client-1", "providerId": "prov-1", "budget": 1500},
            ),
        )
    )

    assert sorted(report.notified) == ["client-1", "prov-user"]
    client_note = notifications_for("client-1")[0]
    assert client_note.title == "Construction Request Submitted"
    assert client_note.message.endswith("The provider will review it soon.")
    assert client_note.link == "/account"

    provider_note = notifications_for("prov-user")[0]
    assert provider_note.title == "New Construction Request"
    assert provider_note.message == (
        "You have received a new construction request. Budget: Rs 1,500.00"
    )
    assert provider_note.link == "/constructor-dashboard"
    assert provider_note.category is NotificationCategory.SERVICE_REQUEST
    assert notifications_for("prov-1") == []


def test_unassigned_request_broadcasts_to_approved_providers(
    context, seed, notifications_for
) -> None:
    seed.provider("r1", user_id="u1", service_type="renovation")
    seed.provider("r2", user_id="u2", service_type="renovation")
    seed.provider("r3", user_id="u3", service_type="renovation", approved=False)
    seed.provider("r4", user_id=None, service_type="renovation")
    seed.provider("c1", user_id="u5", service_type="construction")

    report = asyncio.run(
        on_service_request_created(
            context,
            _created("renovationProjects/req", {"userId": "client", "budget": "250000"}),
        )
    )

    assert sorted(report.notified) == ["client", "u1", "u2"]
    assert notifications_for("u3") == []
    assert notifications_for("u5") == []
    pool_note = notifications_for("u1")[0]
    assert pool_note.title == "New Renovation Request Available"
    assert pool_note.message.endswith("Budget: Rs 250,000.00")
    assert pool_note.link == "/renovator-dashboard"
    assert notifications_for("client")[0].message.endswith(
        "We will match you with a provider soon."
    )


def test_broadcast_matches_legacy_capitalised_service_type(
    context, seed, notifications_for
) -> None:
    seed.provider("legacy", user_id="legacy-user", service_type="Construction")

    asyncio.run(
        on_service_request_created(
            context, _created("constructionProjects/req", {"userId": "client"})
        )
    )

    assert len(notifications_for("legacy-user")) == 1


def test_missing_provider_still_confirms_to_submitter(
    context, notifications_for
) -> None:
    report = asyncio.run(
        on_service_request_created(
            context,
            _created("constructionProjects/req", {"userId": "client", "providerId": "ghost"}),
        )
    )

    assert report.notified == ["client"]
    assert [failure.step for failure in report.failures] == ["resolve.assigned_provider"]
    assert len(notifications_for("client")) == 1


def test_status_update_without_change_creates_nothing(context, seed, store) -> None:
    seed.provider("prov", user_id="prov-user", service_type="construction")

    report = asyncio.run(
        on_service_request_updated(
            context,
            _updated(
                "constructionProjects/r1",
                {"status": "Pending", "userId": "client", "providerId": "prov"},
                {"status": "Pending", "userId": "client", "providerId": "prov", "budget": 9},
            ),
        )
    )

    assert report.skipped == "status unchanged"
    assert report.notified == []
    assert asyncio.run(store.list_notifications("client")) == []


def test_status_update_notifies_submitter_and_provider(
    context, seed, notifications_for
) -> None:
    seed.provider("prov", user_id="prov-user", service_type="renovation")

    report = asyncio.run(
        on_service_request_updated(
            context,
            _updated(
                "renovationProjects/r1",
                {"status": "Pending", "userId": "client", "providerId": "prov"},
                {"status": "In Progress", "userId": "client", "providerId": "prov"},
            ),
        )
    )

    assert sorted(report.notified) == ["client", "prov-user"]
    for recipient in ("client", "prov-user"):
        note = notifications_for(recipient)[0]
        assert note.title == "Renovation Project Status Updated"
        assert '"In Progress"' in note.message
        assert note.category is NotificationCategory.STATUS_UPDATE
    assert notifications_for("prov-user")[0].link == "/renovator-dashboard"


def test_review_notifies_provider_user(context, seed, notifications_for) -> None:
    seed.user("author", name="Ayesha")
    seed.provider("prov", user_id="prov-user", service_type="construction")

    report = asyncio.run(
        on_review_created(
            context,
            _created(
                "reviews/rev1",
                {
                    "targetId": "prov",
                    "targetType": "construction",
                    "reviewerId": "author",
                    "rating": 4,
                },
            ),
        )
    )

    assert report.notified == ["prov-user"]
    note = notifications_for("prov-user")[0]
    assert note.title == "New Review Received"
    assert note.message == "Ayesha left a 4-star review for your construction service."
    assert note.link == "/constructor-dashboard"


def test_review_with_unknown_author_uses_default_name(
    context, seed, notifications_for
) -> None:
    seed.provider("prov", user_id="prov-user", service_type="renovation")

    asyncio.run(
        on_review_created(
            context,
            _created(
                "reviews/rev2",
                {"targetId": "prov", "targetType": "renovation", "authorId": "nobody", "rating": 5},
            ),
        )
    )

    assert notifications_for("prov-user")[0].message.startswith("A user left a 5-star review")


def test_review_for_non_provider_target_is_ignored(context, seed, store) -> None:
    seed.provider("prov", user_id="prov-user", service_type="construction")

    report = asyncio.run(
        on_review_created(
            context,
            _created("reviews/rev3", {"targetId": "prov", "targetType": "property", "rating": 3}),
        )
    )

    assert report.notified == []
    assert report.failures == []
    assert report.skipped is not None
    assert asyncio.run(store.list_notifications("prov-user")) == []


def test_legacy_provider_review_reads_service_type_from_provider(
    context, seed, notifications_for
) -> None:
    seed.provider("prov", user_id="prov-user", service_type="Renovation")

    asyncio.run(
        on_review_created(
            context,
            _created("reviews/rev4", {"targetId": "prov", "targetType": "provider", "rating": 2}),
        )
    )

    note = notifications_for("prov-user")[0]
    assert note.message.endswith("for your renovation service.")
    assert note.link == "/renovator-dashboard"


def test_legacy_provider_review_rejected_when_legacy_disabled(
    make_context, seed, store
) -> None:
    context = make_context(accept_legacy_schema=False)
    seed.provider("prov", user_id="prov-user", service_type="construction")

    report = asyncio.run(
        on_review_created(
            context,
            _created("reviews/rev5", {"targetId": "prov", "targetType": "provider", "rating": 2}),
        )
    )

    assert report.notified == []
    assert asyncio.run(store.list_notifications("prov-user")) == []


def test_support_message_notifies_every_admin(context, seed, notifications_for) -> None:
    seed.admin("a1")
    seed.admin("a2")

    report = asyncio.run(
        on_support_message_created(context, _created("supportMessages/m1", {"name": "Bilal"}))
    )

    assert sorted(report.notified) == ["a1", "a2"]
    assert notifications_for("a1")[0].message == (
        'A new support message has been received: "No subject" from Bilal.'
    )


def test_admin_support_reply_goes_to_user(context, seed, notifications_for) -> None:
    seed.support_chat("sc1", user_id="user-1", admin_id="a1")
    text = "x" * 60

    report = asyncio.run(
        on_support_chat_message_created(
            context,
            _created("supportChats/sc1/messages/m1", {"text": text, "isAdmin": True}),
        )
    )

    assert report.notified == ["user-1"]
    note = notifications_for("user-1")[0]
    assert note.message == f'You have a new message from support: "{"x" * 50}..."'
    assert note.link == "/chatbot"


def test_user_support_message_goes_to_assigned_admin(context, seed, notifications_for) -> None:
    seed.admin("a1")
    seed.admin("a2")
    seed.support_chat("sc1", user_id="user-1", admin_id="a2")

    report = asyncio.run(
        on_support_chat_message_created(
            context, _created("supportChats/sc1/messages/m1", {"text": "help"})
        )
    )

    assert report.notified == ["a2"]
    assert notifications_for("a1") == []
    assert notifications_for("a2")[0].message == 'You have a new message from a user: "help"'


def test_user_support_message_without_admin_broadcasts(context, seed) -> None:
    seed.admin("a1")
    seed.admin("a2")
    seed.support_chat("sc1", user_id="user-1")

    report = asyncio.run(
        on_support_chat_message_created(
            context, _created("supportChats/sc1/messages/m1", {"text": ""})
        )
    )

    assert sorted(report.notified) == ["a1", "a2"]


def test_chat_message_notifies_other_participant(context, seed, notifications_for) -> None:
    seed.user("alice", display_name="Alice")
    seed.chat("c1", ["alice", "bob"])

    report = asyncio.run(
        on_chat_message_created(
            context, _created("chats/c1/messages/m1", {"senderId": "alice", "text": "Hi Bob"})
        )
    )

    assert report.notified == ["bob"]
    note = notifications_for("bob")[0]
    assert note.title == "New Chat Message"
    assert note.message == "Alice: Hi Bob"
    assert note.link == "/chats?chatId=c1"
    assert notifications_for("alice") == []


def test_chat_message_for_missing_chat_is_logged(context, store, caplog) -> None:
    with caplog.at_level("ERROR"):
        report = asyncio.run(
            on_chat_message_created(
                context,
                _created("chats/missing/messages/m1", {"senderId": "alice", "text": "Hi"}),
            )
        )

    assert report.notified == []
    assert report.failures[0].step == "resolve.receiver"
    assert "Chat missing not found" in caplog.text


def test_chat_message_falls_back_to_legacy_receiver(context, seed, notifications_for) -> None:
    seed.chat("c2", ["alice"])

    asyncio.run(
        on_chat_message_created(
            context,
            _created(
                "chats/c2/messages/m1",
                {"senderId": "alice", "receiverId": "carol", "text": None},
            ),
        )
    )

    assert notifications_for("carol")[0].message == "Someone: New message"
