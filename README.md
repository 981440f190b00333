# dailyhelper

A small Telegram bot that keeps a personal reading list. Send it a link and
it stores the page for you. Send `/rnd` and it hands back one of your saved
pages at random, then removes that page from your list.

It uses only the Python standard library.

## Installation

```
pip install .
```

## Running the bot

The bot keeps each user's pages under `~/tg-bot-dailyhelper/users-data`.
That directory must already exist. If it is missing, or is not a directory,
the command logs the problem and exits with status 1.

```
mkdir -p ~/tg-bot-dailyhelper/users-data
dailyhelper --token token
```

Replace `token` with your bot's token. The option can also be spelled
`-token`. If no token is given, the command logs "token is not specified" and
exits with status 1.

Once started, the bot polls `api.telegram.org` for updates in batches of up to
100. When a poll returns nothing, it waits one second before polling again.
Each message in a batch is handled in its own thread, and the whole batch
finishes before the next poll. Errors are logged and the loop carries on. The
bot runs until it is interrupted.

## Chat commands

- any text that parses as a URL with a host (for example
  `https://example.com/article`): saves the page to your list, or replies that
  you already have it
- `/rnd`: sends one of your saved pages at random and removes it from your
  list, or replies that you have no saved pages
- `/help`: explains what the bot can do
- `/start`: sends a greeting followed by the help text

Anything else gets the reply "Unknown command".

## Storage layout

Each user has a directory named after their Telegram username. Each saved page
is a JSON file in that directory holding `url` and `user_name`. The file is
named by `Page.hash()`, the hex MD5 digest of the URL followed by the user
name. Saving the same page twice therefore writes the same file.

## Using the pieces

The parts of the bot can also be used on their own:

```python
from dailyhelper.file_storage import FileStorage
from dailyhelper.storage import Page, NoSavedPagesError

storage = FileStorage("/tmp/pages")          # the directory must exist
page = Page(url="https://example.com/article", user_name="alice")
storage.save(page)
assert storage.exists(page)

try:
    picked = storage.pick_random("alice")
    storage.remove(picked)
except NoSavedPagesError:
    pass
```

The modules are:

- `dailyhelper.storage` defines `Page`, `NoSavedPagesError` and the
  `PageStorer` protocol (`save`, `pick_random`, `remove`, `exists`).
- `dailyhelper.file_storage` defines `FileStorage`, the on-disk `PageStorer`.
- `dailyhelper.telegram_client` defines `TelegramClient`, with `get_updates`
  and `send_message`. It also holds the `Update`, `Message`, `User` and `Chat`
  data classes, and `parse_update` and `parse_updates_response` for decoding
  API replies.
- `dailyhelper.events` defines `Event`, `EventType`, and the `Fetcher` and
  `Processor` protocols.
- `dailyhelper.processor` defines `TelegramProcessor`, which turns updates into
  events with `fetch` and carries out commands with `process`. It also holds
  `to_event`, `is_url`, `Meta`, `UnknownEventTypeError` and
  `UnknownMetaTypeError`.
- `dailyhelper.consumer` defines `Consumer`, the polling loop (`start`) and
  batch handler (`handle_events`).
- `dailyhelper.errors` defines `WrappedError`, `wrap` and `wrap_if_err`. Most
  failures are raised as a `WrappedError` whose message reads
  `"<context>, <cause>"`, with the original error kept as `err` and
  `__cause__`.

## Tests

```
pip install ".[test]"
pytest
```