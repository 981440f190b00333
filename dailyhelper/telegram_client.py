"""Minimal client for the Telegram Bot HTTP API."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any

from dailyhelper.errors import wrap

_GET_UPDATES_METHOD = "getUpdates"
_SEND_MESSAGE_METHOD = "sendMessage"


@dataclass(frozen=True)
class Chat:
    id: int = 0


@dataclass(frozen=True)
class User:
    id: int = 0
    username: str = ""


@dataclass(frozen=True)
class Message:
    chat: Chat
    text: str = ""
    from_user: User | None = None


@dataclass(frozen=True)
class Update:
    id: int
    message: Message | None = None


def _parse_message(data: dict[str, Any]) -> Message:
    sender = data.get("from")
    return Message(
        chat=Chat(id=int((data.get("chat") or {}).get("id", 0))),
        text=data.get("text", ""),
        from_user=(
            User(id=int(sender.get("id", 0)), username=sender.get("username", ""))
            if sender is not None
            else None
        ),
    )


def parse_update(data: dict[str, Any]) -> Update:
    """Build an Update from its decoded JSON object."""
    message = data.get("message")
    return Update(
        id=int(data.get("update_id", 0)),
        message=_parse_message(message) if message is not None else None,
    )


def parse_updates_response(data: bytes | str) -> list[Update]:
    """Decode a getUpdates response body into its list of updates."""
    decoded = json.loads(data)
    return [parse_update(item) for item in decoded.get("result") or []]


class TelegramClient:
    """Sends requests to the Bot API on ``host`` with the given bot token."""

    def __init__(self, host: str, token: str) -> None:
        self.host = host
        self._api_path = "bot" + token

    def get_updates(self, offset: int, limit: int) -> list[Update]:
        """Fetch up to ``limit`` updates starting at ``offset``."""
        try:
            body = self._send_request(
                _GET_UPDATES_METHOD, {"offset": offset, "limit": limit}
            )
            return parse_updates_response(body)
        except Exception as exc:
            raise wrap("can't get updates", exc) from exc

    def send_message(self, chat_id: int, text: str) -> None:
        """Send ``text`` to the chat ``chat_id``."""
        try:
            self._send_request(_SEND_MESSAGE_METHOD, {"chat_id": chat_id, "text": text})
        except Exception as exc:
            raise wrap("can't send message", exc) from exc

    def _send_request(self, method: str, params: dict[str, Any]) -> bytes:
        query = urllib.parse.urlencode(sorted((k, str(v)) for k, v in params.items()))
        url = urllib.parse.urlunsplit(
            ("https", self.host, f"/{self._api_path}/{method}", query, "")
        )
        request = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(request) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            # The API reports failures in the body; hand it back like any other.
            with exc:
                return exc.read()
        except (OSError, ValueError) as exc:
            raise wrap("can't send request", exc) from exc