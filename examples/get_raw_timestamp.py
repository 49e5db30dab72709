#!/usr/bin/env python3
"""Print the raw NTP timestamp obtained from pool.ntp.org."""
from __future__ import annotations

import logging

from sntp_request import SntpRequest


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    with SntpRequest() as sntp:
        timestamp = sntp.get_raw_time()
    print(f"seconds: {timestamp.seconds} frac: {timestamp.fraction}")
    print(f"milliseconds: {timestamp.milliseconds}")


if __name__ == "__main__":
    main()
