"""Line formats of the supported cluster announcements.

Every pattern is compiled once at import time and is matched against
the whole line with ``fullmatch``.  Group names equal the field names of
the model the pattern fills.  The layouts cover the flavours sent by
DXSpider, AR-Cluster and CC-Cluster nodes, e.g.::

    DX de DJ1TO:      3780.0  OH5Z         LSB                            2200Z JO62
    WWV de VE7CC <15Z> :   SFI=68, A=9, K=2, No Storms -> Minor w/G1
    WCY de DK0WCY-1 <22> : K=4 expK=2 A=14 R=0 SFI=68 SA=qui GMF=act Au=no
    WX de LA3WAA <1001Z> :  The command WX will send a local weather announcement.
    To ALL de CT2IDL <1044Z> : TNX qso..
    To LOCAL de IW5CLM: off
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Type

from dxclparser.models import DX, WCY, WWV, WX, SpotRecord, ToAll, ToLocal

# Building blocks
CALL = r"[A-Z0-9/\-#]"
DX_CALL = CALL + r"{3,}"
STATION_CALL = CALL + r"+"
FREQ_KHZ = r"\d+\.\d{1,2}"
HHMM = r"\d{4}"
HOUR = r"[01]\d|2[0-3]"
INDEX = r"\d{1,3}"
LOCATOR = r"[A-Za-z]{2}\d{2}"

DX_PATTERN = re.compile(
    rf"DX de +(?P<call_de>{DX_CALL}):? *(?P<freq>{FREQ_KHZ})"
    rf" *(?P<call_dx>{DX_CALL})"
    rf" +(?P<comment>.*\S)? +(?P<utc>{HHMM})Z"
    rf" *(?P<loc>{LOCATOR})?"
)

WWV_PATTERN = re.compile(
    rf"WWV de +(?P<call_de>{STATION_CALL}) +<(?P<utc>{HOUR})Z?> *:"
    rf" *SFI=(?P<sfi>{INDEX}), A=(?P<a>{INDEX}), K=(?P<k>{INDEX}),"
    r" (?P<info1>.*\b) *-> *(?P<info2>.*\b) *"
)

WCY_PATTERN = re.compile(
    rf"WCY de +(?P<call_de>{STATION_CALL}) +<(?P<utc>{HOUR})> *:"
    rf" +K=(?P<k>{INDEX}) expK=(?P<expk>{INDEX}) A=(?P<a>{INDEX})"
    rf" R=(?P<r>{INDEX}) SFI=(?P<sfi>{INDEX})"
    r" SA=(?P<sa>[a-zA-Z]{1,3}) GMF=(?P<gmf>[a-zA-Z]{1,3}) Au=(?P<au>[a-zA-Z]{2}) *"
)


def _announcement(prefix: str) -> re.Pattern:
    """Pattern of a free-text announcement with an optional <HHMMZ> stamp."""
    return re.compile(
        rf"{prefix} de +(?P<call_de>{STATION_CALL})"
        rf"(?: *<(?P<utc>{HHMM})Z>)?[ :]+(?P<msg>.+)?"
    )


WX_PATTERN = _announcement("WX")
TOALL_PATTERN = _announcement("To ALL")
TOLOCAL_PATTERN = _announcement("To (?:LOCAL|Local)")

SPOT_PATTERNS: Mapping[Type[SpotRecord], re.Pattern] = MappingProxyType(
    {
        DX: DX_PATTERN,
        WWV: WWV_PATTERN,
        WCY: WCY_PATTERN,
        WX: WX_PATTERN,
        ToAll: TOALL_PATTERN,
        ToLocal: TOLOCAL_PATTERN,
    }
)

# RBN comment section, e.g. "CW     9 dB  21 WPM  NCDXF B"
RBN_MODE = r"[A-Za-z0-9]{2,}"
RBN_DB = r"-?\d{1,3}"
RBN_INFO = r"[A-Za-z ]+"

RBN_SPEED_PATTERN = re.compile(
    rf"(?P<mode>{RBN_MODE}) +(?P<db>{RBN_DB}) +dB"
    rf" +(?P<speed>\d{{1,3}}) +(?P<speed_unit>WPM|BPS) +(?P<info>{RBN_INFO})"
)

# e.g. "FT8  -12 dB  FK68    CQ"
RBN_LOCATOR_PATTERN = re.compile(
    rf"(?P<mode>{RBN_MODE}) +(?P<db>{RBN_DB}) +dB"
    rf" +(?P<loc>[A-Z]{{2}}\d{{2}})? +(?P<info>{RBN_INFO})"
)
