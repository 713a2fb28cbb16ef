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
Background task that fetches the earthquake off the interactive thread.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from display.loop import MainLoop
from quake.feed import EarthquakeFeed, FetchError, FetchResult

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class QuakeTask(object):
    """
    Runs one fetch on a worker thread and hands its result to the loop.

    on_post_execute is called exactly once, on the interactive thread,
    after the fetch has completed.  It is not called if the task was
    cancelled before the result was delivered.
    """

    def __init__(self,
                 feed: EarthquakeFeed,
                 loop: MainLoop,
                 on_post_execute: Callable[[FetchResult], None]) -> None:
        self.feed = feed
        self.loop = loop
        self.on_post_execute = on_post_execute
        self.future: Optional[Future] = None
        self.cancelled = False
        self.finished = False
        self._executor: Optional[ThreadPoolExecutor] = None

    def execute(self) -> Future:
        """
        Start the fetch.

        Raises:
            RuntimeError: If the task has already been executed
        """
        if self.future is not None:
            raise RuntimeError("Cannot execute task: the task has already been executed")

        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="quake-task")
        self.future = self._executor.submit(self.do_in_background)
        self.future.add_done_callback(self._on_done)
        # Lets the worker thread exit once the fetch is done
        self._executor.shutdown(wait=False)
        return self.future

    def do_in_background(self) -> FetchResult:
        return self.feed.fetch_result()

    def cancel(self) -> None:
        self.cancelled = True
        if self.future is not None:
            self.future.cancel()

    def _on_done(self, future: Future) -> None:
        # Runs on the worker thread
        if future.cancelled():
            return

        error = future.exception()
        if error is not None:
            logger.error("Earthquake task failed: %r", error)
            result = FetchResult(error=FetchError.TASK, message=repr(error))
        else:
            result = future.result()
        self.loop.post(lambda: self._deliver(result))

    def _deliver(self, result: FetchResult) -> None:
        self.finished = True
        if self.cancelled:
            logger.info("Task cancelled, dropping result")
            return
        self.on_post_execute(result)
