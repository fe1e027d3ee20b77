"""Formatting helpers shared by the notification handlers."""

from __future__ import annotations

from notifier.domain.entities import SERVICE_TYPE_CONSTRUCTION, SERVICE_TYPE_RENOVATION

PREVIEW_LENGTH = 50
EMPTY_PREVIEW = "New message"

ACCOUNT_LINK = "/account"
ADMIN_LINK = "/admin"
SUPPORT_CHAT_LINK = "/chatbot"

SERVICE_LABELS = {
    SERVICE_TYPE_CONSTRUCTION: "Construction",
    SERVICE_TYPE_RENOVATION: "Renovation",
}

PROVIDER_DASHBOARDS = {
    SERVICE_TYPE_CONSTRUCTION: "/constructor-dashboard",
    SERVICE_TYPE_RENOVATION: "/renovator-dashboard",
}


def format_currency(amount: float, symbol: str = "Rs") -> str:
    """Return ``amount`` with thousands separators and two decimals."""

    return f"{symbol} {amount:,.2f}"


def preview(text: str | None, limit: int = PREVIEW_LENGTH) -> str:
    """First ``limit`` characters of ``text``, with ``...`` when truncated."""

    if not text:
        return EMPTY_PREVIEW
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def format_rating(rating: object) -> str:
    if isinstance(rating, float) and rating.is_integer():
        return str(int(rating))
    return str(rating)


def service_label(service_type: str | None) -> str:
    return SERVICE_LABELS.get(service_type or "", "Service")


def provider_dashboard(service_type: str | None) -> str:
    return PROVIDER_DASHBOARDS.get(service_type or "", ACCOUNT_LINK)


def chat_link(chat_id: str) -> str:
    return f"/chats?chatId={chat_id}"


def listing_link(listing_id: str) -> str:
    return f"/properties/{listing_id}"
