"""Minimal SNTP (RFC 4330) client.

One UDP request, one validated reply, one NTP timestamp. Delay/offset
estimation, filtering and clock discipline are left to the caller.
"""

import logging

from .client import SntpRequest
from .constants import NTP_UNIX_OFFSET, POOL_NTP_ADDR
from .packet import (
    PacketSizeError,
    Reply,
    SntpPacketError,
    Timestamp,
    VersionMismatchError,
    WrongMessageTypeError,
    build_request,
    parse_reply,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NTP_UNIX_OFFSET",
    "POOL_NTP_ADDR",
    "PacketSizeError",
    "Reply",
    "SntpPacketError",
    "SntpRequest",
    "Timestamp",
    "VersionMismatchError",
    "WrongMessageTypeError",
    "build_request",
    "parse_reply",
]
