import io
import json
import urllib.error
from unittest import mock
from urllib.parse import parse_qs, urlsplit

import pytest

from dailyhelper.errors import WrappedError
from dailyhelper.telegram_client import (
    Chat,
    Message,
    TelegramClient,
    Update,
    User,
    parse_update,
    parse_updates_response,
)


def _respond(mock_urlopen, body):
    mock_urlopen.return_value.__enter__.return_value.read.return_value = body


def _requested_url(mock_urlopen):
    request = mock_urlopen.call_args.args[0]
    return request, urlsplit(request.full_url)


def test_parse_update_with_message():
    update = parse_update(
        {
            "update_id": 10,
            "message": {
                "text": "/rnd",
                "from": {"id": 5, "username": "alice"},
                "chat": {"id": 42},
            },
        }
    )
    assert update == Update(
        id=10,
        message=Message(chat=Chat(id=42), text="/rnd", from_user=User(5, "alice")),
    )


def test_parse_update_without_message():
    update = parse_update({"update_id": 3})
    assert update.id == 3
    assert update.message is None


def test_parse_update_missing_optional_fields():
    update = parse_update({"update_id": 1, "message": {"chat": {"id": 9}}})
    assert update.message.text == ""
    assert update.message.from_user is None
    assert update.message.chat.id == 9


def test_parse_updates_response_reads_result():
    body = json.dumps(
        {"ok": True, "result": [{"update_id": 1}, {"update_id": 2}]}
    ).encode()
    assert [u.id for u in parse_updates_response(body)] == [1, 2]


def test_parse_updates_response_without_result():
    assert parse_updates_response(b'{"ok": false}') == []


def test_parse_updates_response_invalid_json():
    with pytest.raises(ValueError):
        parse_updates_response(b"not json")


@mock.patch("urllib.request.urlopen")
def test_get_updates_builds_request(mock_urlopen):
    _respond(mock_urlopen, b'{"ok": true, "result": [{"update_id": 7}]}')
    client = TelegramClient("api.telegram.org", "token")

    updates = client.get_updates(3, 100)

    assert updates == [Update(id=7)]
    request, parts = _requested_url(mock_urlopen)
    assert request.get_method() == "GET"
    assert parts.scheme == "https"
    assert parts.netloc == "api.telegram.org"
    assert parts.path == "/bottoken/getUpdates"
    assert parse_qs(parts.query) == {"offset": ["3"], "limit": ["100"]}


@mock.patch("urllib.request.urlopen")
def test_send_message_builds_request(mock_urlopen):
    _respond(mock_urlopen, b'{"ok": true}')
    client = TelegramClient("api.telegram.org", "token")

    result = client.send_message(42, "Saved! 👌")

    assert result is None
    assert mock_urlopen.call_count == 1
    request, parts = _requested_url(mock_urlopen)
    assert request.get_method() == "GET"
    assert parts.path == "/bottoken/sendMessage"
    assert parse_qs(parts.query) == {"chat_id": ["42"], "text": ["Saved! 👌"]}


@mock.patch("urllib.request.urlopen")
def test_get_updates_network_error_is_wrapped(mock_urlopen):
    mock_urlopen.side_effect = urllib.error.URLError("unreachable")
    client = TelegramClient("api.telegram.org", "token")

    with pytest.raises(WrappedError, match="can't get updates, can't send request"):
        client.get_updates(0, 1)


@mock.patch("urllib.request.urlopen")
def test_send_message_network_error_is_wrapped(mock_urlopen):
    mock_urlopen.side_effect = urllib.error.URLError("unreachable")
    client = TelegramClient("api.telegram.org", "token")

    with pytest.raises(WrappedError, match="can't send message") as info:
        client.send_message(1, "hi")
    assert isinstance(info.value.err, WrappedError)


@mock.patch("urllib.request.urlopen")
def test_get_updates_bad_body_is_wrapped(mock_urlopen):
    _respond(mock_urlopen, b"<html>")
    client = TelegramClient("api.telegram.org", "token")

    with pytest.raises(WrappedError, match="can't get updates") as info:
        client.get_updates(0, 1)
    assert isinstance(info.value.err, ValueError)


@mock.patch("urllib.request.urlopen")
def test_http_error_body_is_returned(mock_urlopen):
    body = b'{"ok": false, "description": "Unauthorized"}'
    mock_urlopen.side_effect = urllib.error.HTTPError(
        "https://api.telegram.org", 401, "Unauthorized", {}, io.BytesIO(body)
    )
    client = TelegramClient("api.telegram.org", "token")

    assert client.get_updates(0, 1) == []