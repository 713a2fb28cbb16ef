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
Event record for a single earthquake.
"""

from dataclasses import dataclass

from utils.constants import MAX_EVENT_TIME


@dataclass(frozen=True)
class Event:
    """
    Represents an earthquake event.

    Holds the title (magnitude and location of the earthquake), the time it
    happened in epoch milliseconds, and whether or not a tsunami alert was
    issued (1 if it was issued, 0 if no alert was issued).
    """

    title: str
    time: int
    tsunami_alert: int

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise TypeError("title must be a string, not %s" % type(self.title).__name__)

        for name in ("time", "tsunami_alert"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("%s must be an integer, not %s" % (name, type(value).__name__))

        if not 0 <= self.time <= MAX_EVENT_TIME:
            raise ValueError("time out of range: %d" % self.time)
