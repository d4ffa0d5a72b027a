"""Blox Fruits stock tracker: HTTP relay plus a Telegram stock viewer."""

__version__ = "0.1.0"
