# dxspots/fields.py
"""
Field-level conversion helpers shared by every rule's extractor.

Each helper takes the dict of named captures from a rule match. A group the
rule does not have (or did not participate in the match) maps to ``None``;
a captured value that cannot be converted raises ``FieldConversionError``.
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal
from typing import Optional

Captures = dict[str, Optional[str]]

_EDGES_RE = re.compile(r"^[\s\x00-\x1f\x7f]+|[\s\x00-\x1f\x7f]+$")
_FREQ_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_TIME_RE = re.compile(r"(\d{2})(\d{2})?", re.ASCII)

# Band edges in kHz, inclusive
BAND_RANGES: list[tuple[str, Decimal, Decimal]] = [
    ("160M", Decimal("1800"), Decimal("2000")),
    ("80M", Decimal("3500"), Decimal("4000")),
    ("60M", Decimal("5250"), Decimal("5450")),
    ("40M", Decimal("7000"), Decimal("7300")),
    ("30M", Decimal("10100"), Decimal("10150")),
    ("20M", Decimal("14000"), Decimal("14350")),
    ("17M", Decimal("18068"), Decimal("18168")),
    ("15M", Decimal("21000"), Decimal("21450")),
    ("12M", Decimal("24890"), Decimal("24990")),
    ("10M", Decimal("28000"), Decimal("29700")),
    ("6M", Decimal("50000"), Decimal("54000")),
    ("4M", Decimal("70000"), Decimal("70500")),
    ("2M", Decimal("144000"), Decimal("148000")),
    ("70CM", Decimal("420000"), Decimal("450000")),
]

KNOWN_MODES = frozenset(
    {
        "AM", "CW", "FM", "FT4", "FT8", "JS8", "JT65", "JT9", "LSB", "MFSK",
        "MSK144", "OLIVIA", "PSK31", "PSK63", "Q65", "RTTY", "SSB", "SSTV", "USB",
    }
)

AURORA_FLAGS = {"no": False, "yes": True, "au": True}


class FieldConversionError(ValueError):
    """A captured substring could not be converted to its field type."""

    def __init__(self, field_name: str, text: str):
        super().__init__(f"cannot convert {field_name}={text!r}")
        self.field_name = field_name
        self.text = text


def clean_line(line: str) -> str:
    """Strip surrounding whitespace plus telnet noise such as BEL, CR and NUL."""
    return _EDGES_RE.sub("", line)


def callsign(fields: Captures, name: str) -> str:
    raw = fields.get(name)
    value = (raw or "").strip()
    if not value:
        raise FieldConversionError(name, raw or "")
    return value.upper()


def frequency(fields: Captures, name: str = "frequency") -> Decimal:
    """Frequency in kHz, keeping the digits exactly as written."""
    raw = fields.get(name) or ""
    if not _FREQ_RE.fullmatch(raw):
        raise FieldConversionError(name, raw)
    return Decimal(raw)


def time_of_day(fields: Captures, name: str = "time") -> Optional[dt.time]:
    """``HHMM`` or bare ``HH`` into a time of day. Absent stays absent."""
    raw = fields.get(name)
    if raw is None:
        return None
    m = _TIME_RE.fullmatch(raw)
    if not m:
        raise FieldConversionError(name, raw)
    try:
        return dt.time(int(m.group(1)), int(m.group(2) or 0))
    except ValueError as exc:
        raise FieldConversionError(name, raw) from exc


def integer(fields: Captures, name: str) -> Optional[int]:
    raw = fields.get(name)
    if raw is None:
        return None
    if not _INT_RE.fullmatch(raw):
        raise FieldConversionError(name, raw)
    return int(raw)


def text(fields: Captures, name: str) -> Optional[str]:
    raw = fields.get(name)
    if raw is None:
        return None
    return raw.rstrip() or None


def flag(fields: Captures, name: str) -> Optional[bool]:
    raw = fields.get(name)
    if raw is None:
        return None
    try:
        return AURORA_FLAGS[raw.lower()]
    except KeyError as exc:
        raise FieldConversionError(name, raw) from exc


def band_for(khz: Decimal) -> Optional[str]:
    for label, low, high in BAND_RANGES:
        if low <= khz <= high:
            return label
    return None


def mode_from_comment(comment: Optional[str]) -> Optional[str]:
    """First comment token, if it names a known operating mode."""
    if not comment:
        return None
    token = comment.split(None, 1)[0].upper()
    return token if token in KNOWN_MODES else None
