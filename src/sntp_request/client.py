from __future__ import annotations

import logging
from typing import Tuple, Union

from .constants import DEFAULT_TIMEOUT_S, NTP_PORT, PACKET_SIZE, POOL_NTP_ADDR, RECV_BUFSIZE
from .net import Address, UdpEndpoint
from .packet import PacketSizeError, Timestamp, build_request, parse_reply

logger = logging.getLogger(__name__)

AddressLike = Union[str, Tuple[str, int]]


def normalize_address(address: AddressLike) -> Address:
    if isinstance(address, str):
        return (address, NTP_PORT)
    host, port = address
    return (host, int(port))


class SntpRequest:
    """Single-owner SNTP client: one request, one reply per call, no retries.

    Not safe to share between threads; give each thread its own instance.

    ``timeout`` is in seconds and bounds both send and receive. ``None`` or
    ``0`` block indefinitely (``0`` is *not* the socket's non-blocking mode).
    """

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT_S, endpoint: UdpEndpoint | None = None):
        self._endpoint = endpoint if endpoint is not None else UdpEndpoint.ephemeral()
        self._kiss_of_death = False
        self._timeout: float | None = None
        try:
            self.set_timeout(timeout)
        except ValueError:
            self._endpoint.close()
            raise

    def __enter__(self) -> "SntpRequest":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @property
    def kiss_of_death(self) -> bool:
        """True if the last reply asked us to stop querying that server."""
        return self._kiss_of_death

    def is_kiss_of_death(self) -> bool:
        return self._kiss_of_death

    def set_timeout(self, timeout: float | None) -> None:
        if timeout is not None and timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")
        effective = timeout if timeout else None
        self._endpoint.settimeout(effective)
        self._timeout = effective

    def send(self, address: AddressLike = POOL_NTP_ADDR) -> None:
        addr = normalize_address(address)
        sent = self._endpoint.sendto(build_request(), addr)
        logger.debug("sent %d bytes to %s:%d", sent, addr[0], addr[1])
        if sent != PACKET_SIZE:
            raise PacketSizeError(sent, direction="sent")

    def receive(self) -> Timestamp:
        raw, peer = self._endpoint.recvfrom(RECV_BUFSIZE)
        logger.debug("received %d bytes from %s", len(raw), peer)
        reply = parse_reply(raw)
        self._kiss_of_death = reply.kiss_of_death
        if reply.kiss_of_death:
            logger.warning("kiss-of-death from %s; stop querying this server", peer)
        return reply.transmit

    def get_raw_time(self, address: AddressLike = POOL_NTP_ADDR) -> Timestamp:
        self.send(address)
        return self.receive()

    def get_unix_time(self, address: AddressLike = POOL_NTP_ADDR) -> int:
        return self.get_raw_time(address).unix_seconds

    def close(self) -> None:
        self._endpoint.close()
