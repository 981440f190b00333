"""Error wrapping that keeps the message chain readable."""

from __future__ import annotations


class WrappedError(Exception):
    """An error annotated with a context message.

    The text reads ``"<msg>, <original error>"`` and the original error is
    kept both as ``err`` and as the exception's ``__cause__``.
    """

    def __init__(self, msg: str, err: BaseException) -> None:
        super().__init__(f"{msg}, {err}")
        self.msg = msg
        self.err = err
        self.__cause__ = err


def wrap(msg: str, err: BaseException) -> WrappedError:
    """Return ``err`` wrapped with the context message ``msg``."""
    return WrappedError(msg, err)


def wrap_if_err(msg: str, err: BaseException | None) -> WrappedError | None:
    """Wrap ``err`` with ``msg``, or return None when there is no error."""
    if err is None:
        return None
    return wrap(msg, err)