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
Earthquake feed access.

This module performs the single HTTP request against the USGS earthquake
feed, reads the whole response and extracts the first earthquake into an
Event.  Failures never reach the caller: they are logged, reported through
notify() and collapsed into an empty FetchResult that still records which
kind of failure occurred.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

from quake.event import Event
from utils.config import Config
from utils.constants import REQUEST_HEADERS, URL_SCHEMES
from utils.notify import notify

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class FetchError(Enum):
    """Kinds of failure a fetch can end with."""

    URL = "url"
    NETWORK = "network"
    PARSE = "parse"
    TASK = "task"


class FeedError(Exception):
    """Base class for errors raised while fetching the feed."""

    kind: FetchError = None


class InvalidUrl(FeedError):
    """The feed URL is malformed or uses an unsupported scheme."""

    kind = FetchError.URL


class NetworkError(FeedError):
    """The request failed, timed out, or returned a non-200 status."""

    kind = FetchError.NETWORK


class ParseError(FeedError):
    """The response was not UTF-8 or did not have the expected structure."""

    kind = FetchError.PARSE


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of one fetch.

    Exactly one of three shapes: an event, an error kind with its message,
    or neither (the feed had no earthquakes).
    """

    event: Optional[Event] = None
    error: Optional[FetchError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.event is not None

    @property
    def empty(self) -> bool:
        return self.event is None and self.error is None


def get_https_client(connect_timeout: Optional[float] = None,
                     read_timeout: Optional[float] = None,
                     transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """
    Create an HTTPS client for the feed.

    Args:
        connect_timeout: Connect timeout in seconds (default: Config.CONNECT_TIMEOUT)
        read_timeout: Read timeout in seconds (default: Config.READ_TIMEOUT)
        transport: Optional transport, used by tests to avoid the network

    Returns:
        httpx.Client: Configured HTTP client
    """
    timeout = httpx.Timeout(
        read_timeout if read_timeout is not None else Config.READ_TIMEOUT,
        connect=connect_timeout if connect_timeout is not None else Config.CONNECT_TIMEOUT,
    )
    return httpx.Client(
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    )


def create_url(string_url: str) -> httpx.URL:
    """
    Returns new URL object from the given string URL.

    Raises:
        InvalidUrl: If the URL cannot be parsed or is not http(s)
    """
    try:
        url = httpx.URL(string_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidUrl("Error with creating URL %r: %s" % (string_url, e)) from e

    if url.scheme not in URL_SCHEMES or not url.host:
        raise InvalidUrl("Error with creating URL %r: not an absolute http(s) URL" % string_url)

    return url


def read_from_stream(body: bytes) -> str:
    """
    Convert the response body into a String which contains the whole
    JSON response from the server.

    Raises:
        ParseError: If the body is not valid UTF-8
    """
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError("Response is not valid UTF-8: %s" % e) from e


def make_http_request(url: httpx.URL, client: httpx.Client) -> str:
    """
    Make an HTTP request to the given URL and return the body as a String.

    The response is streamed and always closed before returning, whether
    the body was read completely or not.

    Raises:
        NetworkError: If the request fails or the status is not 200
        ParseError: If the body is not valid UTF-8
    """
    try:
        with client.stream("GET", url, headers=REQUEST_HEADERS) as response:
            if response.status_code != 200:
                raise NetworkError("HTTPSTATUS: %s" % response.status_code)
            body = response.read()
    except httpx.HTTPError as e:
        raise NetworkError("Problem retrieving the earthquake JSON results: %r" % e) from e

    return read_from_stream(body)


def _require(obj: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(obj, dict) or key not in obj:
        raise ParseError("Missing %r in %s" % (key, where))
    value = obj[key]
    if not isinstance(value, kind):
        raise ParseError("Expected %s for %r in %s, got %s"
                         % (kind.__name__, key, where, type(value).__name__))
    return value


def extract_feature_from_json(earthquake_json: str) -> Optional[Event]:
    """
    Return an Event by parsing out information about the first
    earthquake from the input earthquake_json string.

    Returns:
        Event for the first feature, or None if the features array is empty

    Raises:
        ParseError: If the JSON is malformed or lacks a required field
    """
    try:
        base_json_response = json.loads(earthquake_json)
    except (ValueError, RecursionError) as e:
        raise ParseError("Problem parsing the earthquake JSON results: %s" % e) from e

    feature_array = _require(base_json_response, "features", list, "response")

    # Only the first feature (which is an earthquake) is ever used
    if len(feature_array) == 0:
        return None

    properties = _require(feature_array[0], "properties", dict, "features[0]")

    title = _require(properties, "title", str, "properties")
    time = _require(properties, "time", int, "properties")
    tsunami_alert = _require(properties, "tsunami", int, "properties")

    try:
        return Event(title, time, tsunami_alert)
    except (TypeError, ValueError) as e:
        raise ParseError("Invalid earthquake properties: %s" % e) from e


class EarthquakeFeed(object):
    """
    Fetches the most recent earthquake from the feed.

    A client passed in is used as is and left open; otherwise a client is
    created for each fetch and closed before the fetch returns.
    """

    def __init__(self,
                 url: Optional[str] = None,
                 client: Optional[httpx.Client] = None,
                 connect_timeout: Optional[float] = None,
                 read_timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None) -> None:
        self.url = url or Config.REQUEST_URL
        self.client = client
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.transport = transport

    def get_json(self) -> str:
        url = create_url(self.url)
        if self.client is not None:
            return make_http_request(url, self.client)

        with get_https_client(self.connect_timeout, self.read_timeout, self.transport) as client:
            return make_http_request(url, client)

    def fetch_result(self) -> FetchResult:
        """
        Perform the request and parse the first earthquake.

        Never raises; failures are logged and returned as an error kind.
        """
        try:
            event = extract_feature_from_json(self.get_json())
        except FeedError as e:
            logger.error("Unable to get earthquake (%s): %s", e.kind.value, e)
            notify("Unable to get earthquake", str(e), self.url)
            return FetchResult(error=e.kind, message=str(e))

        if event is None:
            logger.info("No earthquakes in the feed response")
            return FetchResult()

        logger.info("EARTHQUAKE: %s", event.title)
        return FetchResult(event=event)

    def fetch(self) -> Optional[Event]:
        """Return the first earthquake, or None if there isn't one or the fetch failed."""
        return self.fetch_result().event


def fetch(url: Optional[str] = None) -> Optional[Event]:
    """Fetch the most recent earthquake from the configured feed."""
    return EarthquakeFeed(url).fetch()
