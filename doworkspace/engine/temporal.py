"""Relative date/time extraction for task text.

Best-effort and deterministic: same input -> same output. Only the first
matching date phrase and the first matching time mention are used.
"""

from __future__ import annotations

from typing import Optional, Tuple

from doworkspace.engine.vocabulary import AT_TIME_RE, BARE_TIME_RE, DATE_PATTERNS


def extract_date(text: str) -> Optional[str]:
    """Return the display label of the first date phrase found, scanning in table order."""
    for pattern, label in DATE_PATTERNS:
        if pattern.search(text):
            return label
    return None


def extract_time(text: str) -> Optional[str]:
    """Return the first time mention, uppercased.

    Prefers the explicit "at 5pm" / "at 10:30" / "at noon" form and falls
    back to a bare "5pm" token that carries am/pm.
    """
    m = AT_TIME_RE.search(text)
    if m is None:
        m = BARE_TIME_RE.search(text)
    if m is None:
        return None
    return m.group(1).upper()


def extract_temporal(text: str) -> Tuple[Optional[str], Optional[str]]:
    return extract_date(text), extract_time(text)
