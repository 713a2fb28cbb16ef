#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def notify(sub, msg=None, url=None):
    """
    Report an unusual event
    """
    text = ""
    if url:
        text += "URL:\n\n"
        text += "  " + str(url)
        text += "\n\n"

    if msg:
        text += "MESSAGE:\n\n"
        text += "  " + str(msg)
        text += "\n\n"

    logger.info(f"NOTIFY:\n\n  {sub}\n\n{text}")
