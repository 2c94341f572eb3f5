"""Tests for pomotodo.services.clock.PollingTickSource."""

from __future__ import annotations

import pytest

from pomotodo.services.clock import PollingTickSource


class FakeTime:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def fake_time():
    return FakeTime()


@pytest.fixture()
def source(fake_time):
    return PollingTickSource(time_func=fake_time)


def test_nothing_fires_before_period(source, fake_time):
    calls = []
    source.start(1000, lambda: calls.append(1))
    fake_time.now += 0.999
    assert source.poll() == 0
    assert calls == []


def test_fires_once_per_period(source, fake_time):
    calls = []
    source.start(1000, lambda: calls.append(1))
    for _ in range(3):
        fake_time.now += 1.0
        source.poll()
    assert len(calls) == 3


def test_late_poll_catches_up(source, fake_time):
    calls = []
    source.start(1000, lambda: calls.append(1))
    fake_time.now += 5.5
    assert source.poll() == 5
    assert len(calls) == 5


def test_cancel_stops_future_calls(source, fake_time):
    calls = []
    handle = source.start(1000, lambda: calls.append(1))
    source.cancel(handle)
    fake_time.now += 10
    assert source.poll() == 0
    assert not source.active


def test_callback_cancelling_itself_preempts_catch_up(source, fake_time):
    calls = []
    handles = []

    def callback():
        calls.append(1)
        source.cancel(handles[0])

    handles.append(source.start(1000, callback))
    fake_time.now += 10
    source.poll()
    assert calls == [1]


def test_callback_cancelling_another_schedule(source, fake_time):
    calls = []
    handles = []

    def first():
        calls.append("first")
        source.cancel(handles[1])

    handles.append(source.start(1000, first))
    handles.append(source.start(1000, lambda: calls.append("second")))
    fake_time.now += 1
    source.poll()
    assert calls == ["first"]


def test_cancel_unknown_handle_is_ignored(source):
    handle = source.start(1000, lambda: None)
    source.cancel(handle)
    source.cancel(handle)


def test_rejects_non_positive_period(source):
    with pytest.raises(ValueError):
        source.start(0, lambda: None)


def test_close_cancels_everything(source, fake_time):
    calls = []
    source.start(1000, lambda: calls.append(1))
    source.start(500, lambda: calls.append(2))
    source.close()
    fake_time.now += 5
    assert source.poll() == 0
