"""Page storage on the local file system, one directory per user."""

from __future__ import annotations

import json
import os
import random
from pathlib import Path

from dailyhelper.errors import wrap
from dailyhelper.storage import NoSavedPagesError, Page

_DEFAULT_PERM = 0o774


class FileStorage:
    """Stores each page as a JSON file named by the page hash."""

    def __init__(self, base_path: str | os.PathLike[str]) -> None:
        path = Path(base_path)
        try:
            is_dir = path.stat() and path.is_dir()
        except FileNotFoundError as exc:
            raise wrap(f"base path '{base_path}' does not exist", exc) from exc
        except OSError as exc:
            raise wrap(f"could not stat base path '{base_path}'", exc) from exc
        if not is_dir:
            raise NotADirectoryError(f"base path '{base_path}' is not a directory")
        self.base_path = path

    def save(self, page: Page) -> None:
        """Write ``page`` to its file, replacing any previous copy."""
        user_dir = self.base_path / page.user_name
        try:
            user_dir.mkdir(mode=_DEFAULT_PERM, parents=True, exist_ok=True)
        except OSError as exc:
            raise wrap(f"cannot create user directory '{user_dir}'", exc) from exc

        page_path = self._page_path(page)
        data = {"url": page.url, "user_name": page.user_name}
        try:
            with page_path.open("w", encoding="utf-8") as file:
                json.dump(data, file)
        except OSError as exc:
            raise wrap(f"cannot write page file '{page_path}'", exc) from exc

    def pick_random(self, user_name: str) -> Page:
        """Return one of the user's pages chosen at random."""
        user_dir = self.base_path / user_name
        try:
            entries = sorted(user_dir.iterdir())
        except OSError as exc:
            raise wrap(f"cannot read user directory '{user_dir}'", exc) from exc

        if not entries:
            raise NoSavedPagesError()

        return self._decode_page(random.choice(entries))

    def remove(self, page: Page) -> None:
        """Delete the file of ``page``."""
        page_path = self._page_path(page)
        try:
            page_path.unlink()
        except OSError as exc:
            raise wrap(f"can't remove page for path: {page_path}", exc) from exc

    def exists(self, page: Page) -> bool:
        """Tell whether a file for ``page`` is present."""
        page_path = self._page_path(page)
        try:
            page_path.stat()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise wrap(
                f"error checking page existence for '{page_path}'", exc
            ) from exc
        return True

    def _page_path(self, page: Page) -> Path:
        return self.base_path / page.user_name / page.hash()

    @staticmethod
    def _decode_page(file_path: Path) -> Page:
        try:
            with file_path.open("r", encoding="utf-8") as file:
                raw = file.read()
        except OSError as exc:
            raise wrap("can't open file with page", exc) from exc
        try:
            data = json.loads(raw)
            return Page(url=data["url"], user_name=data["user_name"])
        except (ValueError, KeyError, TypeError) as exc:
            raise wrap("can't decode page", exc) from exc