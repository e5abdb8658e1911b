# src/taskpad/tasks/dates.py

"""
Date patterns and deadline normalization.

Input:   d/M/yyyy HHmm        e.g. "2/12/2021 1800"
Display: d MMMM yyyy, h:mma   e.g. "2 December 2021, 6:00PM"
Query:   d/M/yyyy             e.g. "2/12/2021"
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from ..core.errors import UnknownDateTime

logger = logging.getLogger(__name__)

DEADLINE_INPUT_FORMAT = "%d/%m/%Y %H%M"
DEADLINE_DISPLAY_FORMAT = "%d %B %Y, %I:%M%p"
CALENDAR_QUERY_FORMAT = "%d/%m/%Y"

# HHmm is exactly four digits; strptime alone accepts "800".
DEADLINE_INPUT_RE = re.compile(r"\d{1,2}/\d{1,2}/\d{4} \d{4}")


@dataclass(frozen=True, slots=True)
class Normalized:
    text: str


@dataclass(frozen=True, slots=True)
class FallbackRaw:
    text: str
    warning: str


ParseOutcome = Normalized | FallbackRaw


def format_deadline(dt: datetime) -> str:
    # strftime has no portable unpadded day/hour, so those two are built by hand.
    hour = dt.hour % 12 or 12
    return f"{dt.day} {dt.strftime('%B %Y')}, {hour}:{dt.strftime('%M%p')}"


def normalize_deadline(raw: str) -> ParseOutcome:
    """Turn a d/M/yyyy HHmm token into display text, or keep it raw with a warning."""
    token = raw.strip()
    try:
        if not DEADLINE_INPUT_RE.fullmatch(token):
            raise ValueError(token)
        dt = datetime.strptime(token, DEADLINE_INPUT_FORMAT)
    except ValueError:
        logger.debug("Deadline %r is not d/M/yyyy HHmm; keeping raw text.", raw)
        return FallbackRaw(text=raw, warning=UnknownDateTime.message)
    return Normalized(text=format_deadline(dt))


def parse_query_date(raw: str | None) -> date:
    if not raw or not raw.strip():
        raise UnknownDateTime()
    try:
        return datetime.strptime(raw.strip(), CALENDAR_QUERY_FORMAT).date()
    except ValueError as e:
        raise UnknownDateTime() from e


def deadline_date(by: str | None) -> date | None:
    """Date of a stored deadline, or None if it was kept raw."""
    if not by:
        return None
    try:
        return datetime.strptime(by, DEADLINE_DISPLAY_FORMAT).date()
    except ValueError:
        return None
