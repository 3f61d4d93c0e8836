# src/arts_assistant/tasks/dates.py

"""
Date/time helpers shared by the command handlers and the store.

Input is matched against INPUT_FORMATS in order and the first format that
parses wins, so "1/3/2024 1800" is always day/month, never month/day.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime

from ..core.errors import InvalidDateFormat

# yyyy-MM-dd HHmm, then d/M/yyyy HHmm
INPUT_FORMATS: tuple[str, ...] = ("%Y-%m-%d %H%M", "%d/%m/%Y %H%M")

STORAGE_FORMAT = "%Y-%m-%d %H%M"

# strptime accepts single-digit fields everywhere; these pin the digit counts.
FORMAT_SHAPES: dict[str, re.Pattern[str]] = {
    "%Y-%m-%d %H%M": re.compile(r"\d{4}-\d{2}-\d{2} \d{4}", re.ASCII),
    "%d/%m/%Y %H%M": re.compile(r"\d{1,2}/\d{1,2}/\d{4} \d{4}", re.ASCII),
}


def parse_datetime(text: str, formats: Sequence[str] = INPUT_FORMATS) -> datetime:
    raw = text.strip()
    if raw:
        for fmt in formats:
            shape = FORMAT_SHAPES.get(fmt)
            if shape is not None and not shape.fullmatch(raw):
                continue
            try:
                return datetime.strptime(raw, fmt)
            except ValueError:
                continue
    raise InvalidDateFormat()


def format_display(value: datetime) -> str:
    """Render as e.g. "Mar 1 2024, 1800" (no zero padding on the day)."""
    return f"{value:%b} {value.day} {value:%Y, %H%M}"


def format_storage(value: datetime) -> str:
    return value.strftime(STORAGE_FORMAT)


def parse_storage(text: str) -> datetime:
    raw = text.strip()
    if not FORMAT_SHAPES[STORAGE_FORMAT].fullmatch(raw):
        raise ValueError(f"{raw!r} does not match {STORAGE_FORMAT}")
    return datetime.strptime(raw, STORAGE_FORMAT)
