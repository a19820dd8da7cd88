"""Obsidian date-token templates.

Daily-note settings describe filenames with moment.js style tokens
(``YYYY-MM-DD``). We support a fixed subset and rewrite it to strftime
directives in a single pass.

INVARIANT: tokens are matched longest-first, so ``YYYY`` is never consumed
as two ``YY`` and ``MMMM`` never as ``MM`` + ``MM``.
"""

from __future__ import annotations

import re
from datetime import date

DEFAULT_FORMAT = "YYYY-MM-DD"

# Ordered longest-first. The order is part of the contract.
TOKEN_DIRECTIVES: tuple[tuple[str, str], ...] = (
    ("YYYY", "%Y"),
    ("MMMM", "%B"),
    ("dddd", "%A"),
    ("MMM", "%b"),
    ("ddd", "%a"),
    ("YY", "%y"),
    ("MM", "%m"),
    ("DD", "%d"),
)

_DIRECTIVES = dict(TOKEN_DIRECTIVES)
_TOKEN_RE = re.compile("|".join(re.escape(token) for token, _ in TOKEN_DIRECTIVES))

# Only these gate rendering of the folder setting.
FOLDER_DATE_MARKERS: tuple[str, ...] = ("YYYY", "MM", "DD")


def translate_template(template: str) -> str:
    """Rewrite date tokens in *template* to strftime directives.

    Examples:
        >>> translate_template("YYYY-MM-DD")
        '%Y-%m-%d'
        >>> translate_template("dddd, MMMM DD")
        '%A, %B %d'
    """
    return _TOKEN_RE.sub(lambda m: _DIRECTIVES[m.group(0)], template)


def render_template(template: str, day: date) -> str:
    """Render *template* for *day*."""
    return day.strftime(translate_template(template))


def has_folder_date_marker(folder: str) -> bool:
    """Return True when a folder setting should be rendered as a template."""
    return any(marker in folder for marker in FOLDER_DATE_MARKERS)
