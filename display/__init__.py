"""
Display modules for Soonami.

This package contains the display surfaces, the interactive loop, the
background fetch task and the earthquake screen.
"""

from .loop import MainLoop
from .screen import Screen
from .surface import ConsoleDisplay, Display, TextDisplay
from .task import QuakeTask

__all__ = [
    "MainLoop",
    "Screen",
    "QuakeTask",
    "Display",
    "TextDisplay",
    "ConsoleDisplay",
]
