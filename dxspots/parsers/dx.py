# dxspots/parsers/dx.py
"""
"Station heard" rules: skimmer reports first, then the three human layouts.

Sample traffic:

    DX de OH6BG-#:     7026.0  W4GNS        CW    24 dB  22 WPM  CQ      1322Z   (RBN)
    DX de DJ1TO:      3780.0  OH5Z         LSB                            2200Z JO62
    DX de ZS6WN:     21075.4  CX2DAJ       FT8                            1625Z
    DX de SPOTTER1:   7030.0  SPOTTED1    CW sig 599  1234Z
"""

from ..fields import (
    Captures,
    band_for,
    callsign,
    frequency,
    integer,
    mode_from_comment,
    text,
    time_of_day,
)
from ..models import DX, RBN, Category, Dialect
from .base import register

CALL = r"[A-Za-z0-9/\-#]"
SKIMMER = r"[A-Za-z0-9/\-]+-#"
LOCATOR = r"[A-Ra-r]{2}\d{2}"

RBN_SPEED = (
    rf"DX de +(?P<spotter>{SKIMMER}):? +(?P<frequency>\d+\.\d+) +(?P<spotted>{CALL}{{3,}}) +"
    r"(?P<comment>(?P<mode>[A-Za-z0-9]{2,}) +(?P<snr>-?\d{1,3}) +dB +"
    r"(?P<speed>\d{1,3}) +(?P<speed_unit>WPM|BPS)(?: +(?P<info>[A-Za-z][A-Za-z ]*?))?)"
    r" +(?P<time>\d{4})Z"
)

RBN_LOCATOR = (
    rf"DX de +(?P<spotter>{SKIMMER}):? +(?P<frequency>\d+\.\d+) +(?P<spotted>{CALL}{{3,}}) +"
    r"(?P<comment>(?P<mode>[A-Za-z0-9]{2,}) +(?P<snr>-?\d{1,3}) +dB +"
    rf"(?P<locator>{LOCATOR})(?: +(?P<info>[A-Za-z][A-Za-z ]*?))?)"
    r" +(?P<time>\d{4})Z"
)

DXSPIDER_DX = (
    rf"DX de +(?P<spotter>{CALL}{{3,}}):? +(?P<frequency>\d+\.\d+) +(?P<spotted>{CALL}{{3,}}) +"
    rf"(?:(?P<comment>.*?) +)?(?P<time>\d{{4}})Z +(?P<locator>{LOCATOR})"
)

# Fixed 75-column layout: frequency right-aligned to column 24, time in columns 71-75
CCCLUSTER_DX = (
    r"(?=.{22}\.\d  \S)(?=.{70}\d{4}Z$)"
    rf"DX de (?P<spotter>{CALL}{{3,}}): +(?P<frequency>\d+\.\d)  (?P<spotted>{CALL}{{3,}}) +"
    r"(?:(?P<comment>.*?) +)?(?P<time>\d{4})Z"
)

# Catch-all; frequency and calls are loose so conversion reports what is wrong
ARCLUSTER_DX = (
    r"DX de +(?P<spotter>[^\s:]*):? +(?P<frequency>\S+) +(?P<spotted>\S+)"
    r"(?: +(?P<comment>.*?))??"
    rf"(?: +(?P<time>\d{{4}})Z(?: +(?P<locator>{LOCATOR}))?)? *"
)


def _heard_fields(fields: Captures, dialect: Dialect) -> dict:
    spotter = callsign(fields, "spotter")
    freq = frequency(fields)
    spotted = callsign(fields, "spotted")
    locator = text(fields, "locator")
    return {
        "dialect": dialect,
        "spotter": spotter,
        "spotted": spotted,
        "frequency": freq,
        "time": time_of_day(fields),
        "comment": text(fields, "comment"),
        "locator": locator.upper() if locator else None,
        "band": band_for(freq),
    }


def _dx(fields: Captures, dialect: Dialect) -> DX:
    common = _heard_fields(fields, dialect)
    return DX(mode=mode_from_comment(common["comment"]), **common)


def _rbn(fields: Captures, dialect: Dialect) -> RBN:
    mode = text(fields, "mode")
    return RBN(
        mode=mode.upper() if mode else None,
        snr=integer(fields, "snr"),
        speed=integer(fields, "speed"),
        speed_unit=text(fields, "speed_unit"),
        info=text(fields, "info"),
        **_heard_fields(fields, dialect),
    )


@register(Category.RBN, Dialect.RBN, RBN_SPEED)
def rbn_speed(fields, dialect):
    return _rbn(fields, dialect)


@register(Category.RBN, Dialect.RBN, RBN_LOCATOR)
def rbn_locator(fields, dialect):
    return _rbn(fields, dialect)


@register(Category.DX, Dialect.DXSPIDER, DXSPIDER_DX)
def dx_dxspider(fields, dialect):
    return _dx(fields, dialect)


@register(Category.DX, Dialect.CC_CLUSTER, CCCLUSTER_DX)
def dx_cccluster(fields, dialect):
    return _dx(fields, dialect)


@register(Category.DX, Dialect.AR_CLUSTER, ARCLUSTER_DX)
def dx_arcluster(fields, dialect):
    return _dx(fields, dialect)
