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
Interactive loop for Soonami.

Callables posted from any thread are run, in order, by whichever thread
drains the loop.  That thread plays the role of the UI thread: display
fields are only ever written from it.
"""

import logging
import queue
import threading
from time import monotonic
from typing import Callable, Optional

# Configure logging
logger = logging.getLogger(__name__)


class MainLoop(object):
    """
    Queue of callables run on the interactive thread.
    """

    def __init__(self) -> None:
        self._queue: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self.thread: Optional[threading.Thread] = None

    def post(self, callback: Callable[[], None]) -> None:
        """Schedule a callable to run on the interactive thread. Safe from any thread."""
        self._queue.put(callback)

    def run_pending(self, timeout: Optional[float] = None) -> int:
        """
        Run the queued callables.

        Args:
            timeout: Seconds to wait for the first callable; None only runs
                     what is already queued

        Returns:
            Number of callables run
        """
        self.thread = threading.current_thread()
        count = 0
        block = timeout is not None
        while True:
            try:
                callback = self._queue.get(block=block, timeout=timeout)
            except queue.Empty:
                return count
            block = False
            callback()
            count += 1

    def run_until(self, condition: Callable[[], bool], timeout: Optional[float] = None) -> bool:
        """
        Run callables until the condition holds or the timeout elapses.

        Returns:
            True if the condition holds
        """
        deadline = None if timeout is None else monotonic() + timeout
        while not condition():
            if deadline is None:
                wait = 0.1
            else:
                wait = deadline - monotonic()
                if wait <= 0:
                    break
                wait = min(wait, 0.1)
            self.run_pending(timeout=wait)

        return condition()

    def is_loop_thread(self) -> bool:
        return self.thread is threading.current_thread()
