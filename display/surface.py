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
Display surfaces for Soonami.

A display holds the text fields the screen writes into, addressed by the
fixed identifiers in utils.constants.VIEWS.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Dict, TextIO

from utils.constants import VIEW_LABELS, VIEWS

# Configure logging
logger = logging.getLogger(__name__)


class Display(ABC):
    """Abstract base class for display surfaces"""

    @abstractmethod
    def set_text(self, view_id: str, text: str) -> None:
        """
        Write text into a display field.

        Args:
            view_id: Field identifier (one of VIEWS)
            text: Text to show

        Raises:
            KeyError: If the field does not exist
        """
        pass

    @abstractmethod
    def get_text(self, view_id: str) -> str:
        """Return the text currently shown in a display field."""
        pass


class TextDisplay(Display):
    """
    In-memory display whose fields start out blank.
    """

    def __init__(self) -> None:
        self.fields: Dict[str, str] = {view_id: "" for view_id in VIEWS}

    def set_text(self, view_id: str, text: str) -> None:
        if view_id not in self.fields:
            raise KeyError("Unknown view: %s" % view_id)
        self.fields[view_id] = text

    def get_text(self, view_id: str) -> str:
        return self.fields[view_id]

    @property
    def is_blank(self) -> bool:
        return not any(self.fields.values())


class ConsoleDisplay(TextDisplay):
    """
    Display that prints its fields to a text stream.
    """

    def __init__(self, stream: TextIO = None) -> None:
        super().__init__()
        self.stream = stream or sys.stdout

    def show(self) -> None:
        """Print one labelled line per field."""
        for view_id in VIEWS:
            self.stream.write("%-15s %s\n" % (VIEW_LABELS[view_id] + ":", self.fields[view_id]))
        self.stream.flush()
