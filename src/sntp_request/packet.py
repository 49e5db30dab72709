from __future__ import annotations

import struct
from dataclasses import dataclass

from .constants import (
    LEAP_UNSYNCHRONIZED,
    MODE_BROADCAST,
    MODE_CLIENT,
    MODE_SERVER,
    NTP_UNIX_OFFSET,
    PACKET_SIZE,
    STRATUM_KISS_OF_DEATH,
    TRANSMIT_OFFSET,
    VERSION,
)

TIMESTAMP_FORMAT = "!II"  # seconds, fraction
FRACTION_SCALE = 1 << 32
U32_MAX = 0xFFFFFFFF


class SntpPacketError(ValueError):
    pass


class PacketSizeError(SntpPacketError):
    def __init__(self, size: int, direction: str = "received"):
        super().__init__(f"invalid SNTP packet size {direction}: expected {PACKET_SIZE}, got {size}")
        self.size = size


class VersionMismatchError(SntpPacketError):
    def __init__(self, version: int):
        super().__init__(f"server returned wrong SNTP version: expected {VERSION}, got {version}")
        self.version = version


class WrongMessageTypeError(SntpPacketError):
    def __init__(self, mode: int):
        super().__init__(f"not an SNTP server reply (mode {mode})")
        self.mode = mode


@dataclass(frozen=True, slots=True)
class Timestamp:
    """NTP 64-bit fixed-point timestamp: seconds since 1900 plus a 2**-32 fraction."""

    seconds: int
    fraction: int = 0

    def __post_init__(self) -> None:
        for name in ("seconds", "fraction"):
            value = getattr(self, name)
            if not 0 <= value <= U32_MAX:
                raise ValueError(f"{name} does not fit in 32 bits: {value}")

    @property
    def fraction_seconds(self) -> float:
        return self.fraction / FRACTION_SCALE

    @property
    def milliseconds(self) -> float:
        return self.fraction_seconds * 1000.0

    @property
    def unix_seconds(self) -> int:
        # negative before 1970; the fraction is not folded in
        return self.seconds - NTP_UNIX_OFFSET

    @property
    def unix_time(self) -> float:
        return self.unix_seconds + self.fraction_seconds

    @staticmethod
    def from_bytes(raw: bytes, offset: int = TRANSMIT_OFFSET) -> "Timestamp":
        seconds, fraction = struct.unpack_from(TIMESTAMP_FORMAT, raw, offset)
        return Timestamp(seconds=seconds, fraction=fraction)


@dataclass(frozen=True, slots=True)
class Reply:
    leap_indicator: int
    version: int
    mode: int
    stratum: int
    transmit: Timestamp

    @property
    def kiss_of_death(self) -> bool:
        return self.stratum == STRATUM_KISS_OF_DEATH


def encode_header(leap_indicator: int, version: int, mode: int) -> int:
    return (leap_indicator << 6) | (version << 3) | mode


def decode_header(header: int) -> tuple[int, int, int]:
    return (header >> 6) & 0x3, (header >> 3) & 0x7, header & 0x7


def build_request() -> bytes:
    packet = bytearray(PACKET_SIZE)
    packet[0] = encode_header(LEAP_UNSYNCHRONIZED, VERSION, MODE_CLIENT)
    return bytes(packet)


def parse_reply(raw: bytes, received: int | None = None) -> Reply:
    """Validate a server reply and decode its transmit timestamp.

    ``received`` is the byte count reported by the transport and defaults to
    ``len(raw)``. Checks run in order: size, version, mode.
    """
    size = len(raw) if received is None else received
    if size != PACKET_SIZE or len(raw) < PACKET_SIZE:
        raise PacketSizeError(size)

    leap_indicator, version, mode = decode_header(raw[0])
    if version != VERSION:
        raise VersionMismatchError(version)
    if mode not in (MODE_SERVER, MODE_BROADCAST):
        raise WrongMessageTypeError(mode)

    return Reply(
        leap_indicator=leap_indicator,
        version=version,
        mode=mode,
        stratum=raw[1],
        transmit=Timestamp.from_bytes(raw),
    )
