"""
Earthquake modules for Soonami.

This package contains the earthquake record and the USGS feed client.
"""

from quake.event import Event
from quake.feed import (EarthquakeFeed, FeedError, FetchError, FetchResult,
                        InvalidUrl, NetworkError, ParseError, fetch)

__all__ = [
    'Event',
    'EarthquakeFeed', 'fetch',
    'FetchResult', 'FetchError',
    'FeedError', 'InvalidUrl', 'NetworkError', 'ParseError',
]
