"""Typed views of CQHTTP API responses and events."""

from dataclasses import dataclass, field
from typing import Any

from cqcode.message import Message, parse_message

# Statuses CQHTTP uses for accepted actions
OK_STATUSES = ("ok", "async")


@dataclass
class ApiResponse:
    """Response to an API action."""

    # "ok", "async" or "failed"
    status: str
    # 0 on success; CQHTTP/Coolq error code otherwise
    retcode: int = 0
    # Action-specific payload
    data: Any = None
    # Request correlation id (WebSocket API only)
    echo: Any = None
    # Error description, when the server provides one
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in OK_STATUSES

    @classmethod
    def from_dict(cls, raw: dict) -> "ApiResponse":
        return cls(
            status=str(raw.get("status", "")),
            retcode=int(raw.get("retcode", 0) or 0),
            data=raw.get("data"),
            echo=raw.get("echo"),
            message=str(raw.get("message") or raw.get("wording") or ""),
        )


@dataclass
class User:
    """A QQ user, as reported in events and user-info actions."""

    user_id: int
    nickname: str = ""
    # Group nickname (empty outside groups)
    card: str = ""
    sex: str = ""
    age: int = 0
    # Group role: "owner", "admin" or "member"
    role: str = ""
    title: str = ""

    @property
    def display_name(self) -> str:
        """Group card if set, otherwise nickname."""
        return self.card or self.nickname

    @classmethod
    def from_dict(cls, raw: dict) -> "User":
        return cls(
            user_id=int(raw.get("user_id", 0) or 0),
            nickname=str(raw.get("nickname") or ""),
            card=str(raw.get("card") or ""),
            sex=str(raw.get("sex") or ""),
            age=int(raw.get("age", 0) or 0),
            role=str(raw.get("role") or ""),
            title=str(raw.get("title") or ""),
        )


@dataclass
class Group:
    group_id: int
    group_name: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "Group":
        return cls(
            group_id=int(raw.get("group_id", 0) or 0),
            group_name=str(raw.get("group_name") or ""),
        )


@dataclass
class Update:
    """One event pushed by CQHTTP (message, notice, request or meta event)."""

    # "message", "notice", "request" or "meta_event"
    post_type: str
    # "private", "group" or "discuss" (message events)
    message_type: str = ""
    notice_type: str = ""
    request_type: str = ""
    meta_event_type: str = ""
    sub_type: str = ""
    message_id: int = 0
    user_id: int = 0
    group_id: int = 0
    discuss_id: int = 0
    # QQ number of the bot that received the event
    self_id: int = 0
    # Message exactly as CQHTTP sent it (CQ string or segment array)
    raw_message: Any = None
    sender: User | None = None
    # Decoded message content (empty for non-message events)
    message: Message = field(default_factory=Message)
    # Original event payload
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_event(cls, event: dict) -> "Update":
        """Parse a raw event dict; the ``message`` field may be a string or an array."""
        sender_raw = event.get("sender")
        raw_message = event.get("message")
        return cls(
            post_type=str(event.get("post_type", "")),
            message_type=str(event.get("message_type", "")),
            notice_type=str(event.get("notice_type", "")),
            request_type=str(event.get("request_type", "")),
            meta_event_type=str(event.get("meta_event_type", "")),
            sub_type=str(event.get("sub_type", "")),
            message_id=int(event.get("message_id", 0) or 0),
            user_id=int(event.get("user_id", 0) or 0),
            group_id=int(event.get("group_id", 0) or 0),
            discuss_id=int(event.get("discuss_id", 0) or 0),
            self_id=int(event.get("self_id", 0) or 0),
            raw_message=raw_message,
            sender=User.from_dict(sender_raw) if isinstance(sender_raw, dict) else None,
            message=parse_message(raw_message),
            raw=event,
        )

    @property
    def detail_type(self) -> str:
        """The post-type specific event type (e.g. message_type for messages)."""
        return {
            "message": self.message_type,
            "notice": self.notice_type,
            "request": self.request_type,
            "meta_event": self.meta_event_type,
        }.get(self.post_type, "")

    @property
    def chat_type(self) -> str:
        if self.message_type:
            return self.message_type
        if self.group_id:
            return "group"
        return "discuss" if self.discuss_id else "private"

    @property
    def chat_id(self) -> int:
        """Id to reply to: group, discuss or user id depending on chat type."""
        if self.chat_type == "group":
            return self.group_id
        if self.chat_type == "discuss":
            return self.discuss_id
        return self.user_id

    @property
    def is_to_me(self) -> bool:
        """True if the message @-mentions the bot that received it."""
        return bool(self.self_id) and self.message.mentions(self.self_id)

    def event_names(self) -> list[str]:
        """Event names this update is emitted under, most specific first.

        E.g. ``["message.group.normal", "message.group", "message"]``.
        """
        names: list[str] = []
        detail = self.detail_type
        if detail:
            if self.sub_type:
                names.append(f"{self.post_type}.{detail}.{self.sub_type}")
            names.append(f"{self.post_type}.{detail}")
        names.append(self.post_type)
        return names
