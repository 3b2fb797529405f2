# dxspots/models.py
"""
Structured spot records produced by the classifier.

Every variant is a frozen pydantic model tagged by ``kind``; ``Spot`` is the
discriminated union over all of them. Fields a dialect does not provide stay
``None``, never ``""`` or ``0``.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    DX = "DX"
    RBN = "RBN"
    WCY = "WCY"
    WWV = "WWV"
    WX = "WX"
    TO_ALL = "ToAll"
    TO_LOCAL = "ToLocal"


class Dialect(str, Enum):
    """Cluster server implementation whose line layout matched."""

    DXSPIDER = "DXSpider"
    AR_CLUSTER = "AR-Cluster"
    CC_CLUSTER = "CC Cluster"
    RBN = "RBN"


Callsign = Annotated[str, Field(min_length=1, pattern=r"^\S+$")]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    dialect: Dialect


class _HeardSpot(_Record):
    """Fields shared by human and skimmer 'station heard' reports."""

    spotter: Callsign
    spotted: Callsign
    frequency: Decimal = Field(..., description="kHz, exactly as written")
    time: Optional[dt.time] = None
    comment: Optional[str] = None
    locator: Optional[str] = None
    band: Optional[str] = None
    mode: Optional[str] = None

    @property
    def frequency_hz(self) -> int:
        return int(self.frequency * 1000)


class DX(_HeardSpot):
    kind: Literal[Category.DX] = Category.DX


class RBN(_HeardSpot):
    kind: Literal[Category.RBN] = Category.RBN
    snr: Optional[int] = None
    speed: Optional[int] = None
    speed_unit: Optional[Literal["WPM", "BPS"]] = None
    info: Optional[str] = None


class WWV(_Record):
    kind: Literal[Category.WWV] = Category.WWV
    reporter: Callsign
    time: Optional[dt.time] = None
    flux: Optional[int] = None
    a_index: Optional[int] = None
    k_index: Optional[int] = None
    conditions: Optional[str] = None
    forecast: Optional[str] = None


class WCY(_Record):
    kind: Literal[Category.WCY] = Category.WCY
    reporter: Callsign
    time: Optional[dt.time] = None
    k_index: Optional[int] = None
    expected_k_index: Optional[int] = None
    a_index: Optional[int] = None
    sunspots: Optional[int] = None
    flux: Optional[int] = None
    solar_activity: Optional[str] = None
    geomagnetic_field: Optional[str] = None
    aurora: Optional[bool] = None


class WX(_Record):
    kind: Literal[Category.WX] = Category.WX
    originator: Callsign
    time: Optional[dt.time] = None
    message: Optional[str] = None


class _Announcement(_Record):
    sender: Callsign
    recipient: Optional[str] = None
    time: Optional[dt.time] = None
    message: Optional[str] = None


class ToAll(_Announcement):
    kind: Literal[Category.TO_ALL] = Category.TO_ALL


class ToLocal(_Announcement):
    kind: Literal[Category.TO_LOCAL] = Category.TO_LOCAL


Spot = Annotated[
    Union[DX, RBN, WCY, WWV, WX, ToAll, ToLocal],
    Field(discriminator="kind"),
]


# ----- outcomes -----
class Unrecognized(BaseModel):
    """The line matched no registered rule. Expected for MOTD text, prompts and blanks."""

    model_config = ConfigDict(frozen=True)

    line: str


class MalformedField(BaseModel):
    """A rule matched structurally but one captured field failed conversion."""

    model_config = ConfigDict(frozen=True)

    category: Category
    dialect: Dialect
    field_name: str
    text: str
    line: str
