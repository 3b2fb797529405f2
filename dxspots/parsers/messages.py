# dxspots/parsers/messages.py
"""
Free-text announcements: WX, To ALL and To LOCAL.

CC Cluster stamps these with ``<HHMMZ>`` between the call and the colon;
DXSpider puts the colon straight after the call.
"""

from ..fields import Captures, callsign, text, time_of_day
from ..models import WX, Category, Dialect, ToAll, ToLocal
from .base import register

CALL = r"[A-Za-z0-9/\-#]*"
STAMP = r" *<(?P<time>\d{4})Z> *:"
MESSAGE = r"(?: *(?P<message>.*))?"

# WX de LA3WAA <1001Z> :  Sunny and warm
CCCLUSTER_WX = rf"WX de +(?P<originator>{CALL}){STAMP}{MESSAGE}"
# WX de VA3SAE: va3sub
DXSPIDER_WX = rf"WX de +(?P<originator>{CALL}) *:{MESSAGE}"

CCCLUSTER_TOALL = rf"To (?P<recipient>ALL) de +(?P<sender>{CALL}){STAMP}{MESSAGE}"
DXSPIDER_TOALL = rf"To (?P<recipient>ALL) de +(?P<sender>{CALL}) *:{MESSAGE}"

CCCLUSTER_TOLOCAL = rf"To (?P<recipient>LOCAL|Local) de +(?P<sender>{CALL}){STAMP}{MESSAGE}"
DXSPIDER_TOLOCAL = rf"To (?P<recipient>LOCAL|Local) de +(?P<sender>{CALL}) *:{MESSAGE}"


def _wx(fields: Captures, dialect):
    return WX(
        dialect=dialect,
        originator=callsign(fields, "originator"),
        time=time_of_day(fields),
        message=text(fields, "message"),
    )


def _announcement(model, fields: Captures, dialect):
    recipient = text(fields, "recipient")
    return model(
        dialect=dialect,
        sender=callsign(fields, "sender"),
        recipient=recipient.upper() if recipient else None,
        time=time_of_day(fields),
        message=text(fields, "message"),
    )


@register(Category.WX, Dialect.CC_CLUSTER, CCCLUSTER_WX)
def wx_cccluster(fields, dialect):
    return _wx(fields, dialect)


@register(Category.WX, Dialect.DXSPIDER, DXSPIDER_WX)
def wx_dxspider(fields, dialect):
    return _wx(fields, dialect)


@register(Category.TO_ALL, Dialect.CC_CLUSTER, CCCLUSTER_TOALL)
def toall_cccluster(fields, dialect):
    return _announcement(ToAll, fields, dialect)


@register(Category.TO_ALL, Dialect.DXSPIDER, DXSPIDER_TOALL)
def toall_dxspider(fields, dialect):
    return _announcement(ToAll, fields, dialect)


@register(Category.TO_LOCAL, Dialect.CC_CLUSTER, CCCLUSTER_TOLOCAL)
def tolocal_cccluster(fields, dialect):
    return _announcement(ToLocal, fields, dialect)


@register(Category.TO_LOCAL, Dialect.DXSPIDER, DXSPIDER_TOLOCAL)
def tolocal_dxspider(fields, dialect):
    return _announcement(ToLocal, fields, dialect)
