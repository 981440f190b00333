"""Command that runs the page-keeping Telegram bot."""

from __future__ import annotations

import argparse
import logging
import os

from dailyhelper.consumer import Consumer
from dailyhelper.file_storage import FileStorage
from dailyhelper.processor import TelegramProcessor
from dailyhelper.telegram_client import TelegramClient

log = logging.getLogger(__name__)

HOST = "api.telegram.org"
STORAGE_PATH = "~/tg-bot-dailyhelper/users-data"
BATCH_SIZE = 100


def _must_token(argv: list[str] | None) -> str:
    parser = argparse.ArgumentParser(prog="dailyhelper")
    parser.add_argument(
        "-token",
        "--token",
        dest="token",
        default="",
        help="token for access to telegram bot",
    )
    args = parser.parse_args(argv)
    if not args.token:
        log.critical("token is not specified")
        raise SystemExit(1)
    return args.token


def main(argv: list[str] | None = None) -> None:
    """Start the bot and serve updates until interrupted."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    client = TelegramClient(HOST, _must_token(argv))

    try:
        storage = FileStorage(os.path.expanduser(STORAGE_PATH))
    except Exception as exc:
        log.critical("can't init file storage: %s", exc)
        raise SystemExit(1) from exc

    processor = TelegramProcessor(client, storage)
    Consumer(processor, processor, BATCH_SIZE).start()