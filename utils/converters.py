#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Display conversion utilities for Soonami.

This module converts earthquake values from the feed into the strings shown
on screen.
"""

from datetime import datetime, tzinfo
from typing import Optional

from dateutil import tz

from utils.constants import ALERT_NOT_AVAILABLE, ALERT_STRINGS, DATE_FORMAT


def to_datetime(time_in_milliseconds: int, zone: Optional[tzinfo] = None) -> datetime:
    """
    Convert epoch milliseconds to an aware datetime.

    Args:
        time_in_milliseconds: Milliseconds since the epoch
        zone: Timezone to express the result in (default: local)

    Returns:
        Aware datetime in the given zone
    """
    zone = zone or tz.tzlocal()
    seconds, millis = divmod(time_in_milliseconds, 1000)
    when = datetime.fromtimestamp(seconds, tz=tz.tzutc())
    return when.replace(microsecond=millis * 1000).astimezone(zone)


def get_date_string(time_in_milliseconds: int, zone: Optional[tzinfo] = None) -> str:
    """
    Return a formatted date and time string for when the earthquake happened.

    Args:
        time_in_milliseconds: Milliseconds since the epoch
        zone: Timezone to format in (default: local)

    Returns:
        Text like "Sat, 2 May 2015 at 21:39:51 UTC"
    """
    when = to_datetime(time_in_milliseconds, zone)
    return when.strftime(DATE_FORMAT).format(day=when.day)


def get_tsunami_alert_string(tsunami_alert: int) -> str:
    """
    Return the display string for whether or not there was a tsunami alert.

    Args:
        tsunami_alert: Alert code from the feed

    Returns:
        "No" for 0, "Yes" for 1, "Not available" otherwise
    """
    return ALERT_STRINGS.get(tsunami_alert, ALERT_NOT_AVAILABLE)
