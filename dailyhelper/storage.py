"""Saved pages and the interface of a page store."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class NoSavedPagesError(LookupError):
    """The user has no saved pages."""

    def __init__(self, message: str = "no saved pages for user") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Page:
    """A link saved by a user."""

    url: str
    user_name: str

    def hash(self) -> str:
        """Return the hex MD5 digest of the URL followed by the user name."""
        digest = hashlib.md5(usedforsecurity=False)
        digest.update(self.url.encode())
        digest.update(self.user_name.encode())
        return digest.hexdigest()


@runtime_checkable
class PageStorer(Protocol):
    """Storage of pages per user."""

    def save(self, page: Page) -> None:
        """Store ``page``."""
        ...

    def pick_random(self, user_name: str) -> Page:
        """Return a random page of ``user_name``; raise NoSavedPagesError if none."""
        ...

    def remove(self, page: Page) -> None:
        """Delete ``page``."""
        ...

    def exists(self, page: Page) -> bool:
        """Tell whether ``page`` is stored."""
        ...