"""
Utility modules for Soonami.

This package contains configuration, constants, display conversions and
notification helpers.
"""

from .constants import (ALERT_NOT_AVAILABLE, ALERT_STRINGS, DATE_FORMAT,
                        USGS_REQUEST_URL, VIEW_DATE, VIEW_TITLE,
                        VIEW_TSUNAMI_ALERT, VIEWS)
from .converters import get_date_string, get_tsunami_alert_string

__all__ = ['ALERT_NOT_AVAILABLE', 'ALERT_STRINGS', 'DATE_FORMAT',
           'USGS_REQUEST_URL', 'VIEW_DATE', 'VIEW_TITLE',
           'VIEW_TSUNAMI_ALERT', 'VIEWS',
           'get_date_string', 'get_tsunami_alert_string']
