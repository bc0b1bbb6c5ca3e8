"""CQHTTP API actions shared by the HTTP and WebSocket clients.

Subclasses provide ``call``; everything here is expressed in terms of it.
"""

import logging
from typing import Any

from cqcode.media import Media
from cqcode.message import Message
from qqbot.models import ApiResponse, Group, User

logger = logging.getLogger("qqbot.api")

# Chat type -> parameter carrying the chat id in send_msg
_CHAT_ID_PARAMS = {
    "private": "user_id",
    "group": "group_id",
    "discuss": "discuss_id",
}

# Anything send_message accepts as message content
Sendable = str | Media | Message


def encode_message(message: Sendable, message_format: str) -> str | list[dict[str, Any]]:
    """Encode outgoing message content.

    A plain ``str`` is sent as text (it is escaped, not interpreted as CQ
    codes); use ``parse_message`` first to send a raw CQ string.
    """
    if isinstance(message, Message):
        return message.to_payload(message_format)
    if isinstance(message, str):
        return Message.of(message).to_payload(message_format)
    return Message([message]).to_payload(message_format)


class ApiMixin:
    """Typed wrappers for CQHTTP actions."""

    # "string" or "array"; how outgoing messages are encoded
    message_format: str = "string"

    async def call(self, action: str, **params: Any) -> ApiResponse:
        raise NotImplementedError

    # --- Messages ---

    async def send_message(self, chat_type: str, chat_id: int, message: Sendable) -> int:
        """Send a message to a private, group or discuss chat.

        Returns:
            The message id assigned by CQHTTP (0 if none was returned)

        Raises:
            ValueError: If ``chat_type`` is unknown
        """
        try:
            id_param = _CHAT_ID_PARAMS[chat_type]
        except KeyError:
            raise ValueError(f"Unknown chat type: {chat_type}") from None
        resp = await self.call(
            "send_msg",
            message_type=chat_type,
            **{id_param: chat_id},
            message=encode_message(message, self.message_format),
        )
        data = resp.data if isinstance(resp.data, dict) else {}
        return int(data.get("message_id", 0) or 0)

    async def delete_msg(self, message_id: int) -> ApiResponse:
        return await self.call("delete_msg", message_id=message_id)

    async def send_like(self, user_id: int, times: int = 1) -> ApiResponse:
        return await self.call("send_like", user_id=user_id, times=times)

    # --- Users and groups ---

    async def get_login_info(self) -> User:
        """Fetch the bot's own account."""
        resp = await self.call("get_login_info")
        return User.from_dict(resp.data or {})

    async def get_stranger_info(self, user_id: int, no_cache: bool = False) -> User:
        resp = await self.call("get_stranger_info", user_id=user_id, no_cache=no_cache)
        return User.from_dict(resp.data or {})

    async def get_group_member_info(
        self, group_id: int, user_id: int, no_cache: bool = False
    ) -> User:
        """Fetch one group member; cached data is faster but may be stale."""
        resp = await self.call(
            "get_group_member_info", group_id=group_id, user_id=user_id, no_cache=no_cache
        )
        return User.from_dict(resp.data or {})

    async def get_group_member_list(self, group_id: int) -> list[User]:
        """Fetch all members of a group; details may be incomplete."""
        resp = await self.call("get_group_member_list", group_id=group_id)
        return [User.from_dict(item) for item in resp.data or []]

    async def get_group_list(self) -> list[Group]:
        resp = await self.call("get_group_list")
        return [Group.from_dict(item) for item in resp.data or []]

    # --- Group administration ---

    async def set_group_kick(
        self, group_id: int, user_id: int, reject_add_request: bool = False
    ) -> ApiResponse:
        return await self.call(
            "set_group_kick",
            group_id=group_id,
            user_id=user_id,
            reject_add_request=reject_add_request,
        )

    async def set_group_ban(
        self, group_id: int, user_id: int, duration: int = 30 * 60
    ) -> ApiResponse:
        """Mute a member for ``duration`` seconds (0 lifts the ban)."""
        return await self.call(
            "set_group_ban", group_id=group_id, user_id=user_id, duration=duration
        )

    async def set_group_anonymous_ban(
        self, group_id: int, flag: str, duration: int = 30 * 60
    ) -> ApiResponse:
        return await self.call(
            "set_group_anonymous_ban", group_id=group_id, flag=flag, duration=duration
        )

    async def set_group_whole_ban(self, group_id: int, enable: bool = True) -> ApiResponse:
        """Only administrators may speak while enabled."""
        return await self.call("set_group_whole_ban", group_id=group_id, enable=enable)

    async def set_group_admin(
        self, group_id: int, user_id: int, enable: bool = True
    ) -> ApiResponse:
        return await self.call(
            "set_group_admin", group_id=group_id, user_id=user_id, enable=enable
        )

    async def set_group_anonymous(self, group_id: int, enable: bool = True) -> ApiResponse:
        return await self.call("set_group_anonymous", group_id=group_id, enable=enable)

    async def set_group_card(self, group_id: int, user_id: int, card: str = "") -> ApiResponse:
        return await self.call("set_group_card", group_id=group_id, user_id=user_id, card=card)

    async def set_group_special_title(
        self, group_id: int, user_id: int, special_title: str = "", duration: int = -1
    ) -> ApiResponse:
        """Set a member's special title; ``duration`` -1 means permanent."""
        return await self.call(
            "set_group_special_title",
            group_id=group_id,
            user_id=user_id,
            special_title=special_title,
            duration=duration,
        )

    async def leave_chat(self, chat_type: str, chat_id: int, dismiss: bool = False) -> ApiResponse:
        """Leave a group or discuss; ``dismiss`` disbands a group the bot owns."""
        if chat_type == "group":
            return await self.call("set_group_leave", group_id=chat_id, is_dismiss=dismiss)
        if chat_type == "discuss":
            return await self.call("set_discuss_leave", discuss_id=chat_id)
        raise ValueError(f"Cannot leave chat type: {chat_type}")

    # --- Requests ---

    async def set_friend_add_request(
        self, flag: str, approve: bool = True, remark: str = ""
    ) -> ApiResponse:
        return await self.call("set_friend_add_request", flag=flag, approve=approve, remark=remark)

    async def set_group_add_request(
        self, flag: str, sub_type: str, approve: bool = True, reason: str = ""
    ) -> ApiResponse:
        """Handle a join request or invitation; ``sub_type`` comes from the request event."""
        return await self.call(
            "set_group_add_request",
            flag=flag,
            sub_type=sub_type,
            approve=approve,
            reason=reason,
        )
