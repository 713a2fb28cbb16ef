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
Screen that displays information about a single earthquake.
"""

import logging
import threading
from datetime import tzinfo
from typing import Optional

from display.loop import MainLoop
from display.surface import Display
from display.task import QuakeTask
from quake.event import Event
from quake.feed import EarthquakeFeed, FetchResult
from utils.config import Config
from utils.constants import VIEW_DATE, VIEW_TITLE, VIEW_TSUNAMI_ALERT
from utils.converters import get_date_string, get_tsunami_alert_string

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class Screen(object):
    def __init__(self,
                 display: Display,
                 loop: MainLoop,
                 feed: Optional[EarthquakeFeed] = None,
                 zone: Optional[tzinfo] = None) -> None:
        self.display = display
        self.loop = loop
        self.feed = feed or EarthquakeFeed()
        self.zone = zone or Config.get_timezone()
        self.task: Optional[QuakeTask] = None
        self.result: Optional[FetchResult] = None
        self.destroyed = threading.Event()

    def on_create(self) -> None:
        """Kick off a QuakeTask to perform the network request"""
        self.task = QuakeTask(self.feed, self.loop, self.on_post_execute)
        self.task.execute()

    def on_destroy(self) -> None:
        self.destroyed.set()
        if self.task is not None:
            self.task.cancel()

    @property
    def is_finished(self) -> bool:
        return self.task is not None and (self.task.finished or self.task.cancelled)

    def on_post_execute(self, result: FetchResult) -> None:
        """
        Update the screen with the earthquake fetched by the task.

        Raises:
            RuntimeError: If called from a thread other than the loop's
        """
        if not self.loop.is_loop_thread():
            raise RuntimeError("Screen updates must run on the loop thread")
        self.result = result
        self.render(result.event)

    def render(self, event: Optional[Event]) -> None:
        if event is None:
            return

        self.update_ui(event)

    def update_ui(self, earthquake: Event) -> None:
        """
        Update the screen to display information from the given Event.
        """
        if self.destroyed.is_set():
            logger.info("Screen destroyed, not displaying %s", earthquake.title)
            return

        self.display.set_text(VIEW_TITLE, earthquake.title)
        self.display.set_text(VIEW_DATE, get_date_string(earthquake.time, self.zone))
        self.display.set_text(VIEW_TSUNAMI_ALERT, get_tsunami_alert_string(earthquake.tsunami_alert))
