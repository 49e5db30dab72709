from __future__ import annotations

PACKET_SIZE = 48
RECV_BUFSIZE = 1024  # larger than a packet so oversized replies are detected

NTP_PORT = 123
POOL_NTP_ADDR = ("pool.ntp.org", NTP_PORT)

# seconds between 1900-01-01 (NTP epoch) and 1970-01-01 (Unix epoch)
NTP_UNIX_OFFSET = 2_208_988_800

VERSION = 4

LEAP_UNSYNCHRONIZED = 3

MODE_CLIENT = 3
MODE_SERVER = 4
MODE_BROADCAST = 5

STRATUM_KISS_OF_DEATH = 0

TRANSMIT_OFFSET = 40

DEFAULT_TIMEOUT_S = 5.0
