"""Turns Telegram updates into events and carries out the bot's commands."""

from __future__ import annotations

import logging
import urllib.parse
from dataclasses import dataclass
from typing import Protocol

from dailyhelper.errors import wrap
from dailyhelper.events import Event, EventType
from dailyhelper.storage import NoSavedPagesError, Page, PageStorer
from dailyhelper.telegram_client import Update

log = logging.getLogger(__name__)

RND_CMD = "/rnd"
HELP_CMD = "/help"
START_CMD = "/start"

MSG_HELP = (
    "I can save and keep you pages. Also I can offer you them to read.\n"
    "\n"
    "In order to save the page, just send me al link to it.\n"
    "\n"
    "In order to get a random page from your list, send me command /rnd.\n"
    "Caution! After that, this page will be removed from your list!"
)
MSG_HELLO = "Hi there! 👾\n\n" + MSG_HELP
MSG_UNKNOWN_COMMAND = "Unknown command 🤔"
MSG_NO_SAVED_PAGES = "You have no saved pages 🙊"
MSG_SAVED = "Saved! 👌"
MSG_ALREADY_EXISTS = "You have already have this page in your list 🤗"


class UnknownEventTypeError(ValueError):
    """The event is of a type the processor cannot handle."""

    def __init__(self, message: str = "unknown event type") -> None:
        super().__init__(message)


class UnknownMetaTypeError(TypeError):
    """The event carries metadata of an unexpected kind."""

    def __init__(self, message: str = "unknown meta type") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Meta:
    """Where a message came from."""

    chat_id: int
    username: str


class _Client(Protocol):
    def get_updates(self, offset: int, limit: int) -> list[Update]: ...

    def send_message(self, chat_id: int, text: str) -> None: ...


def is_url(text: str) -> bool:
    """Tell whether ``text`` parses as a URL with a host part."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
        return False
    try:
        parts = urllib.parse.urlsplit(text)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    return host != "" and not any(ch.isspace() for ch in host)


def to_event(update: Update) -> Event:
    """Convert a Telegram update into an event."""
    message = update.message
    if message is None:
        return Event(type=EventType.UNKNOWN, text="")
    username = message.from_user.username if message.from_user is not None else ""
    return Event(
        type=EventType.MESSAGE,
        text=message.text,
        meta=Meta(chat_id=message.chat.id, username=username),
    )


def _caused_by(exc: BaseException | None, kind: type[BaseException]) -> bool:
    while exc is not None:
        if isinstance(exc, kind):
            return True
        exc = exc.__cause__
    return False


class TelegramProcessor:
    """Fetches updates from Telegram and answers the commands in them."""

    def __init__(self, client: _Client, storage: PageStorer) -> None:
        self.client = client
        self.storage = storage
        self.offset = 0

    def fetch(self, limit: int) -> list[Event]:
        """Return up to ``limit`` new events and advance the update offset."""
        try:
            updates = self.client.get_updates(self.offset, limit)
        except Exception as exc:
            raise wrap("cannot get events", exc) from exc

        result = []
        for update in updates:
            result.append(to_event(update))
            self.offset = update.id + 1
        return result

    def process(self, event: Event) -> None:
        """Handle one event, raising if it cannot be handled."""
        if event.type is not EventType.MESSAGE:
            raise wrap("can't process message", UnknownEventTypeError())
        self._process_message(event)

    def _process_message(self, event: Event) -> None:
        meta = event.meta
        if not isinstance(meta, Meta):
            raise wrap("can't process message", wrap("can't get meta", UnknownMetaTypeError()))
        try:
            self._do_cmd(event.text, meta.chat_id, meta.username)
        except Exception as exc:
            raise wrap("can't process message", exc) from exc

    def _do_cmd(self, text: str, chat_id: int, username: str) -> None:
        text = text.strip()
        log.info("got new command '%s' from '%s'", text, username)

        if is_url(text):
            self._save_page(chat_id, text, username)
        elif text == RND_CMD:
            self._send_random(chat_id, username)
        elif text == HELP_CMD:
            self.client.send_message(chat_id, MSG_HELP)
        elif text == START_CMD:
            self.client.send_message(chat_id, MSG_HELLO)
        else:
            self.client.send_message(chat_id, MSG_UNKNOWN_COMMAND)

    def _save_page(self, chat_id: int, page_url: str, username: str) -> None:
        page = Page(url=page_url, user_name=username)
        try:
            if self.storage.exists(page):
                self.client.send_message(chat_id, MSG_ALREADY_EXISTS)
                return
            self.storage.save(page)
            self.client.send_message(chat_id, MSG_SAVED)
        except Exception as exc:
            raise wrap("can't do command: save page", exc) from exc

    def _send_random(self, chat_id: int, username: str) -> None:
        try:
            try:
                page = self.storage.pick_random(username)
            except Exception as exc:
                if not _caused_by(exc, NoSavedPagesError):
                    raise
                self.client.send_message(chat_id, MSG_NO_SAVED_PAGES)
                return
            self.client.send_message(chat_id, page.url)
            self.storage.remove(page)
        except Exception as exc:
            raise wrap("can't do command: can't send random", exc) from exc