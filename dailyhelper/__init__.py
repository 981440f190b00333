"""Telegram bot that saves links per user and returns a random one on request."""

__version__ = "0.1.0"