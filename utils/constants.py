"""
Constants for the Soonami earthquake screen.

This module contains the fixed endpoint, request headers, display field
identifiers and display strings used throughout the application.
"""

# URL to query the USGS dataset for earthquake information
USGS_REQUEST_URL = (
    "https://earthquake.usgs.gov/fdsnws/event/1/query"
    "?format=geojson&starttime=2012-01-01&endtime=2012-12-01&minmagnitude=6"
)

# Request timeouts in seconds
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 10.0

REQUEST_HEADERS = {
    "User-Agent": "Soonami/1.0",
    "Accept": "application/geo+json, application/json",
}

# Schemes the feed may be fetched over
URL_SCHEMES = ("http", "https")

# Display field identifiers
VIEW_TITLE = "title"
VIEW_DATE = "date"
VIEW_TSUNAMI_ALERT = "tsunami_alert"

VIEWS = [VIEW_TITLE, VIEW_DATE, VIEW_TSUNAMI_ALERT]

# Labels used when a display prints its fields
VIEW_LABELS = {
    VIEW_TITLE: "Title",
    VIEW_DATE: "Date",
    VIEW_TSUNAMI_ALERT: "Tsunami alert",
}

# Tsunami alert codes from the feed
TSUNAMI_ALERT_NO = 0
TSUNAMI_ALERT_YES = 1

# Display strings for the tsunami alert codes
ALERT_STRINGS = {
    TSUNAMI_ALERT_NO: "No",
    TSUNAMI_ALERT_YES: "Yes",
}
ALERT_NOT_AVAILABLE = "Not available"

# Date layout; the day of month is inserted unpadded
DATE_FORMAT = "%a, {day} %b %Y at %H:%M:%S %Z"

# Latest event time that still formats in every timezone: one day before
# the end of year 9999 UTC, in epoch milliseconds
MAX_EVENT_TIME = 253402214399999
