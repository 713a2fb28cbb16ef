#!/usr/bin/env python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Command-line runner for Soonami.

Shows the most recent earthquake from the USGS feed: the screen is created,
the fetch runs in the background, and once it completes the title, date and
tsunami alert fields are printed.
"""

import argparse
import logging
import sys

from display.loop import MainLoop
from display.screen import Screen
from display.surface import ConsoleDisplay
from quake.feed import EarthquakeFeed
from utils.config import Config

logger = logging.getLogger(__name__)

VERSION = 1
REVISION = 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Show the most recent earthquake from the USGS feed"
    )
    parser.add_argument("--url", default=None,
                        help="Feed URL (default: SOONAMI_REQUEST_URL or the USGS query)")
    parser.add_argument("--timezone", default=None,
                        help="Timezone for the date, e.g. UTC (default: local)")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Seconds to wait for the fetch (default: connect + read timeout)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version",
                        version="%%(prog)s %d.%d" % (VERSION, REVISION))
    return parser.parse_args(argv)


def run(args, display=None, feed=None):
    """
    Run one screen until its fetch completes.

    Returns:
        Exit status: 0 if an earthquake was displayed, 1 otherwise
    """
    display = display or ConsoleDisplay()
    feed = feed or EarthquakeFeed(url=args.url)
    zone = Config.get_timezone(args.timezone)
    timeout = args.timeout
    if timeout is None:
        timeout = Config.CONNECT_TIMEOUT + Config.READ_TIMEOUT

    loop = MainLoop()
    screen = Screen(display, loop, feed=feed, zone=zone)
    screen.on_create()
    try:
        if not loop.run_until(lambda: screen.is_finished, timeout=timeout):
            logger.warning("Timed out after %.1f seconds waiting for the feed", timeout)
    finally:
        screen.on_destroy()

    if isinstance(display, ConsoleDisplay):
        display.show()

    return 0 if screen.result is not None and screen.result.ok else 1


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else Config.LOG_LEVEL)

    try:
        Config.validate()
        Config.get_timezone(args.timezone)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
