#!/usr/bin/env python3
"""Print the current time obtained from pool.ntp.org."""
from __future__ import annotations

import datetime
import logging

from sntp_request import SntpRequest


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    with SntpRequest() as sntp:
        unix_time = sntp.get_unix_time()
        if sntp.is_kiss_of_death():
            logging.warning("server sent kiss-of-death; do not query it again")
    print(datetime.datetime.fromtimestamp(unix_time))


if __name__ == "__main__":
    main()
