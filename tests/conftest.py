"""
Shared fixtures for the Soonami tests.

No test touches the network: requests are answered by transports defined
here and injected into the httpx client.
"""
import json
import os
import sys

import httpx
import pytest

# Add the project root to the path
root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, root_dir)

# Keep the shell environment from changing the defaults under test
for name in ("SOONAMI_REQUEST_URL", "SOONAMI_CONNECT_TIMEOUT", "SOONAMI_READ_TIMEOUT", "SOONAMI_TIMEZONE"):
    os.environ.pop(name, None)

TEST_URL = "https://earthquake.test/fdsnws/event/1/query?format=geojson"

QUAKE_PROPERTIES = {
    "title": "M 6.8 - 50km offshore",
    "time": 1430602791000,
    "tsunami": 1,
}


def feed_body(*properties):
    """Build a feed response with one feature per properties dict."""
    return json.dumps({
        "type": "FeatureCollection",
        "features": [{"type": "Feature", "properties": p} for p in properties],
    }).encode("utf-8")


class TrackingStream(httpx.SyncByteStream):
    """Response body that records whether it was closed."""

    def __init__(self, body, fail_read=False):
        self.body = body
        self.fail_read = fail_read
        self.closed = False

    def __iter__(self):
        # Half the body, then a dropped connection when failing
        if self.fail_read:
            yield self.body[:len(self.body) // 2]
            raise httpx.ReadError("connection reset while reading body")
        yield self.body

    def close(self):
        self.closed = True


class TrackingTransport(httpx.BaseTransport):
    """Transport that records requests and open/close of every stream."""

    def __init__(self, body=b"", status_code=200, fail_read=False, error=None):
        self.body = body
        self.status_code = status_code
        self.fail_read = fail_read
        self.error = error
        self.requests = []
        self.streams = []
        self.closed = False

    def handle_request(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"{self.error.__name__} for {request.url}", request=request)

        stream = TrackingStream(self.body, fail_read=self.fail_read)
        self.streams.append(stream)
        return httpx.Response(self.status_code, stream=stream, request=request)

    def close(self):
        self.closed = True

    @property
    def open_streams(self):
        return [s for s in self.streams if not s.closed]


@pytest.fixture
def quake_body():
    return feed_body(QUAKE_PROPERTIES, {"title": "M 6.1 - inland", "time": 1, "tsunami": 0})


@pytest.fixture
def mock_transport(quake_body):
    return httpx.MockTransport(lambda request: httpx.Response(200, content=quake_body))
