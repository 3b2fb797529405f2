# dxspots/parsers/bulletins.py
"""
Propagation bulletins (WWV and WCY).

DXSpider and CC Cluster print these identically; both are tagged DXSpider.
"""

from ..fields import Captures, callsign, flag, integer, text, time_of_day
from ..models import WCY, WWV, Category, Dialect
from .base import register

REPORTER = r"(?P<reporter>[A-Za-z0-9/\-#]*)"

WWV_BODY = (
    r"SFI=(?P<flux>[^,]*), *A=(?P<a_index>[^,]*), *K=(?P<k_index>[^,]*?)"
    r"(?:, *(?P<conditions>.*?))?(?: *-> *(?P<forecast>.*?))? *"
)

# WWV de VE7CC <15Z> :   SFI=68, A=9, K=2, No Storms -> Minor w/G1
ARCLUSTER_WWV = rf"WWV de +{REPORTER} +<(?P<time>\d{{2}})Z> *: *" + WWV_BODY

# WWV de VE7CC <21>:   SFI=70, A=12, K=3, No Storms -> No Storms
DXSPIDER_WWV = rf"WWV de +{REPORTER} +<(?P<time>\d{{2}})> *: *" + WWV_BODY

# WCY de DK0WCY-1 <22> : K=4 expK=2 A=14 R=0 SFI=68 SA=qui GMF=act Au=no
DXSPIDER_WCY = (
    rf"WCY de +{REPORTER} +<(?P<time>\d{{2}})Z?> *: *"
    r"K=(?P<k_index>\S*) +expK=(?P<expected_k_index>\S*) +A=(?P<a_index>\S*) +"
    r"R=(?P<sunspots>\S*) +SFI=(?P<flux>\S*) +SA=(?P<solar_activity>\S*) +"
    r"GMF=(?P<geomagnetic_field>\S*) +Au=(?P<aurora>\S*)"
)


def _wwv(fields: Captures, dialect):
    return WWV(
        dialect=dialect,
        reporter=callsign(fields, "reporter"),
        time=time_of_day(fields),
        flux=integer(fields, "flux"),
        a_index=integer(fields, "a_index"),
        k_index=integer(fields, "k_index"),
        conditions=text(fields, "conditions"),
        forecast=text(fields, "forecast"),
    )


@register(Category.WWV, Dialect.AR_CLUSTER, ARCLUSTER_WWV)
def wwv_arcluster(fields, dialect):
    return _wwv(fields, dialect)


@register(Category.WWV, Dialect.DXSPIDER, DXSPIDER_WWV)
def wwv_dxspider(fields, dialect):
    return _wwv(fields, dialect)


@register(Category.WCY, Dialect.DXSPIDER, DXSPIDER_WCY)
def wcy_dxspider(fields, dialect):
    return WCY(
        dialect=dialect,
        reporter=callsign(fields, "reporter"),
        time=time_of_day(fields),
        k_index=integer(fields, "k_index"),
        expected_k_index=integer(fields, "expected_k_index"),
        a_index=integer(fields, "a_index"),
        sunspots=integer(fields, "sunspots"),
        flux=integer(fields, "flux"),
        solar_activity=text(fields, "solar_activity"),
        geomagnetic_field=text(fields, "geomagnetic_field"),
        aurora=flag(fields, "aurora"),
    )
