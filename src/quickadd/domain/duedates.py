"""Natural-language due dates in task text.

``"Call mom tom"`` parses to a due date of tomorrow and the cleaned task
text ``"Call mom"``. Phrase recognition is done by :mod:`dateparser`
(English only, preferring future dates relative to *today*), so
``tomorrow``, ``friday``, ``Jan 20``, ``20 January``, ``next week``,
``in 2 months`` and ISO dates all work.

dateparser does not know the three-letter shorthands ``tod``, ``tom``,
``yes`` and ``mon``..``sun``. They are expanded before the search and the
reported spans are mapped back onto the caller's text.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, NamedTuple

from dateparser.search import search_dates
from pydantic import BaseModel, Field

SHORTHANDS: dict[str, str] = {
    "tod": "today",
    "tom": "tomorrow",
    "yes": "yesterday",
    "mon": "monday",
    "tue": "tuesday",
    "wed": "wednesday",
    "thu": "thursday",
    "fri": "friday",
    "sat": "saturday",
    "sun": "sunday",
}

_SHORTHAND_RE = re.compile(r"\b(?:" + "|".join(SHORTHANDS) + r")\b", re.IGNORECASE)

LANGUAGES = ["en"]


class ParsedDate(BaseModel):
    """One date phrase found in the text."""

    model_config = {"frozen": True}

    text: str
    start: int
    end: int
    day: date

    @property
    def date_string(self) -> str:
        return self.day.isoformat()


class DateParseResult(BaseModel):
    """Task text with date phrases removed, plus the dates found."""

    model_config = {"frozen": True}

    cleaned_text: str
    parsed_dates: list[ParsedDate] = Field(default_factory=list)

    @property
    def primary_date(self) -> ParsedDate | None:
        return self.parsed_dates[0] if self.parsed_dates else None


class Expansion(NamedTuple):
    """Where a shorthand sat in the original text and where its word sits now."""

    original_start: int
    original_end: int
    expanded_start: int
    expanded_end: int


def expand_shorthands(text: str) -> tuple[str, list[Expansion]]:
    """Replace whole-word shorthands with the words dateparser understands."""
    parts: list[str] = []
    expansions: list[Expansion] = []
    last = offset = 0
    for match in _SHORTHAND_RE.finditer(text):
        word = SHORTHANDS[match.group(0).lower()]
        parts.append(text[last : match.start()])
        parts.append(word)
        start = match.start() + offset
        expansions.append(Expansion(match.start(), match.end(), start, start + len(word)))
        offset += len(word) - len(match.group(0))
        last = match.end()
    parts.append(text[last:])
    return "".join(parts), expansions


def to_original(position: int, expansions: list[Expansion], *, end: bool = False) -> int:
    """Map an offset in the expanded text back to the original text.

    An offset inside an expanded word snaps to the shorthand's start, or
    to its end when *end* is set.
    """
    shift = 0
    for exp in expansions:
        if position <= exp.expanded_start:
            break
        if position >= exp.expanded_end:
            shift = exp.original_end - exp.expanded_end
            continue
        return exp.original_end if end else exp.original_start
    return position + shift


def _search_settings(today: date) -> dict[str, Any]:
    return {
        "RELATIVE_BASE": datetime.combine(today, time()),
        "PREFER_DATES_FROM": "future",
        "RETURN_AS_TIMEZONE_AWARE": False,
    }


def parse_natural_date(text: str, today: date) -> DateParseResult:
    """Find date phrases in *text* relative to *today*."""
    expanded, expansions = expand_shorthands(text)
    found = search_dates(expanded, languages=LANGUAGES, settings=_search_settings(today)) or []

    parsed: list[ParsedDate] = []
    cursor = 0
    for phrase, when in found:
        start = expanded.find(phrase, cursor)
        if start < 0:
            continue
        cursor = start + len(phrase)
        orig_start = to_original(start, expansions)
        orig_end = to_original(cursor, expansions, end=True)
        parsed.append(
            ParsedDate(
                text=text[orig_start:orig_end],
                start=orig_start,
                end=orig_end,
                day=when.date(),
            )
        )

    cleaned = text
    for item in reversed(parsed):
        cleaned = cleaned[: item.start] + cleaned[item.end :]
    cleaned = re.sub(r"\s+", " ", cleaned).strip()

    return DateParseResult(cleaned_text=cleaned, parsed_dates=parsed)


def relative_date_label(target: date, today: date) -> str:
    """Human label for *target*: ``Today``, ``In 3 days``, ``2 days ago``..."""
    diff = (target - today).days
    if diff == 0:
        return "Today"
    if diff == 1:
        return "Tomorrow"
    if diff == -1:
        return "Yesterday"
    if 1 < diff <= 7:
        return f"In {diff} days"
    if -7 <= diff < -1:
        return f"{-diff} days ago"
    return target.isoformat()
