#!/usr/bin/env python3
"""
Integration tests for the earthquake screen: background fetch, handoff to
the interactive loop, and rendering into the display fields.
"""
import threading

import httpx
import pytest
from dateutil import tz

from conftest import QUAKE_PROPERTIES, TEST_URL, TrackingTransport, feed_body
from display.loop import MainLoop
from display.screen import Screen
from display.surface import ConsoleDisplay, TextDisplay
from display.task import QuakeTask
from quake.event import Event
from quake.feed import EarthquakeFeed, FetchError
from utils.constants import VIEW_DATE, VIEW_TITLE, VIEW_TSUNAMI_ALERT
from utils.converters import get_date_string

UTC = tz.tzutc()


def make_screen(transport, display=None):
    loop = MainLoop()
    feed = EarthquakeFeed(url=TEST_URL, transport=transport)
    return Screen(display or TextDisplay(), loop, feed=feed, zone=UTC), loop


def run_screen(transport):
    screen, loop = make_screen(transport)
    screen.on_create()
    assert loop.run_until(lambda: screen.is_finished, timeout=5)
    return screen


def test_screen_renders_first_earthquake(mock_transport):
    """Test the end-to-end fetch, parse and render"""
    print("Testing Screen end to end...")

    screen = run_screen(mock_transport)

    assert screen.display.get_text(VIEW_TITLE) == "M 6.8 - 50km offshore"
    assert screen.display.get_text(VIEW_DATE) == get_date_string(1430602791000, UTC)
    assert screen.display.get_text(VIEW_DATE) == "Sat, 2 May 2015 at 21:39:51 UTC"
    assert screen.display.get_text(VIEW_TSUNAMI_ALERT) == "Yes"
    assert screen.result.ok

    print("✓ Earthquake rendered")


@pytest.mark.parametrize("transport, kind", [
    (TrackingTransport(b'{"features":[]}'), None),
    (TrackingTransport(b"not json"), FetchError.PARSE),
    (TrackingTransport(feed_body(QUAKE_PROPERTIES), status_code=500), FetchError.NETWORK),
    (TrackingTransport(error=httpx.ConnectError), FetchError.NETWORK),
])
def test_screen_stays_blank_on_failure(transport, kind):
    """Test that no field changes when there is nothing to show"""
    screen = run_screen(transport)

    assert screen.display.is_blank
    assert screen.result.event is None
    assert screen.result.error is kind
    assert transport.open_streams == []


def test_render_absent_is_noop():
    display = TextDisplay()
    screen = Screen(display, MainLoop(), feed=EarthquakeFeed(url=TEST_URL), zone=UTC)

    screen.render(None)

    assert display.is_blank


@pytest.mark.parametrize("code, text", [(0, "No"), (1, "Yes"), (2, "Not available"), (-7, "Not available")])
def test_render_alert_text(code, text):
    display = TextDisplay()
    screen = Screen(display, MainLoop(), feed=EarthquakeFeed(url=TEST_URL), zone=UTC)

    screen.render(Event("M 5.0 - somewhere", 0, code))

    assert display.get_text(VIEW_TSUNAMI_ALERT) == text
    assert "1970" in display.get_text(VIEW_DATE)


def test_destroyed_screen_is_not_written(mock_transport):
    """Test that a result arriving after teardown is dropped"""
    screen, loop = make_screen(mock_transport)
    screen.on_create()
    screen.task.future.result(timeout=5)

    screen.on_destroy()
    loop.run_pending(timeout=1)

    assert screen.display.is_blank
    assert screen.result is None
    assert screen.is_finished


def test_update_ui_after_destroy_is_noop():
    display = TextDisplay()
    screen = Screen(display, MainLoop(), feed=EarthquakeFeed(url=TEST_URL), zone=UTC)

    screen.on_destroy()
    screen.update_ui(Event("M 5.0 - somewhere", 0, 1))

    assert display.is_blank


def test_result_delivered_on_loop_thread(mock_transport):
    """Test that the completion callback runs on the interactive thread"""
    loop = MainLoop()
    seen = []
    task = QuakeTask(EarthquakeFeed(url=TEST_URL, transport=mock_transport), loop,
                     lambda result: seen.append((threading.current_thread(), loop.is_loop_thread(), result)))

    future = task.execute()
    future.result(timeout=5)
    assert seen == []

    loop.run_until(lambda: task.finished, timeout=5)

    assert len(seen) == 1
    thread, on_loop_thread, result = seen[0]
    assert thread is threading.current_thread()
    assert on_loop_thread
    assert result.event.title == "M 6.8 - 50km offshore"


def test_task_executes_once(mock_transport):
    task = QuakeTask(EarthquakeFeed(url=TEST_URL, transport=mock_transport), MainLoop(), lambda result: None)
    task.execute()

    with pytest.raises(RuntimeError):
        task.execute()


def test_console_display_show():
    import io

    stream = io.StringIO()
    display = ConsoleDisplay(stream)
    display.set_text(VIEW_TITLE, "M 6.8 - 50km offshore")
    display.show()

    lines = stream.getvalue().splitlines()
    assert lines[0] == "Title:          M 6.8 - 50km offshore"
    assert lines[2].startswith("Tsunami alert:")

    with pytest.raises(KeyError):
        display.set_text("magnitude", "6.8")


def test_screen_finishes_on_deeply_nested_json():
    """Test that a body too deep to decode still finishes with a blank screen"""
    body = b'{"features": ' + b"[" * 200000 + b"]" * 200000 + b"}"

    screen = run_screen(TrackingTransport(body))

    assert screen.display.is_blank
    assert screen.result.error is FetchError.PARSE


class BrokenFeed(EarthquakeFeed):
    def fetch_result(self):
        raise RuntimeError("worker failed")


def test_screen_finishes_when_worker_fails():
    """Test that an exception in the worker is delivered instead of hanging"""
    loop = MainLoop()
    screen = Screen(TextDisplay(), loop, feed=BrokenFeed(url=TEST_URL), zone=UTC)
    screen.on_create()

    assert loop.run_until(lambda: screen.is_finished, timeout=5)
    assert screen.display.is_blank
    assert screen.result.error is FetchError.TASK
    assert "worker failed" in screen.result.message


def test_screen_update_off_loop_thread_refused(mock_transport):
    screen, loop = make_screen(mock_transport)
    loop.run_pending()
    errors = []

    def deliver():
        try:
            screen.on_post_execute(screen.feed.fetch_result())
        except RuntimeError as e:
            errors.append(e)

    worker = threading.Thread(target=deliver)
    worker.start()
    worker.join(timeout=5)

    assert len(errors) == 1
    assert screen.display.is_blank
