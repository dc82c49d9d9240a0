"""Shared helpers used across the engine."""

from __future__ import annotations

import sys

__all__ = ["log"]


def log(message: str, *args: object) -> None:
    """Print a printf-style formatted line to standard output.

    With no arguments the message is printed as it stands.
    """
    text = message % args if args else message
    print(text, file=sys.stdout)