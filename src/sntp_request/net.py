from __future__ import annotations

import socket
from typing import Tuple

Address = Tuple[str, int]


class UdpEndpoint:
    """Blocking UDP socket bound to a local ephemeral port.

    A timeout of ``None`` blocks indefinitely. Send and receive share the
    socket, so the timeout applies to both.
    """

    def __init__(self, sock: socket.socket):
        self.sock = sock

    @classmethod
    def ephemeral(cls, host: str = "0.0.0.0", timeout: float | None = None) -> "UdpEndpoint":
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind((host, 0))
            sock.settimeout(timeout)
        except OSError:
            sock.close()
            raise
        return cls(sock)

    def settimeout(self, timeout: float | None) -> None:
        self.sock.settimeout(timeout)

    def sendto(self, data: bytes, addr: Address) -> int:
        return self.sock.sendto(data, addr)

    def recvfrom(self, bufsize: int) -> Tuple[bytes, Address]:
        return self.sock.recvfrom(bufsize)

    def close(self) -> None:
        self.sock.close()
