"""
Classify DX cluster telnet lines and extract structured spot records.

    >>> from dxspots import parse
    >>> spot = parse("To ALL de OP1: Net starting now")
    >>> spot.kind.value, spot.sender, spot.message
    ('ToAll', 'OP1', 'Net starting now')
"""

from .models import (
    DX,
    RBN,
    WCY,
    WWV,
    WX,
    Category,
    Dialect,
    MalformedField,
    Spot,
    ToAll,
    ToLocal,
    Unrecognized,
)
from .normalize import ParseResult, parse, resolve_timestamp, spot_key

__all__ = [
    "DX",
    "RBN",
    "WCY",
    "WWV",
    "WX",
    "Category",
    "Dialect",
    "MalformedField",
    "ParseResult",
    "Spot",
    "ToAll",
    "ToLocal",
    "Unrecognized",
    "parse",
    "resolve_timestamp",
    "spot_key",
]
