from datetime import timedelta
from unittest import mock

import pytest

from aocutils.timing import (
    TimeRepeatedCalls,
    print_single_call,
    start,
    time_single_call,
)


def test_start_is_monotonic():
    first = start()
    second = start()
    assert second >= first


def test_time_single_call_is_not_negative():
    assert time_single_call(start()) >= timedelta(0)


def test_time_single_call_uses_clock():
    with mock.patch("aocutils.timing.time.perf_counter", return_value=10.0):
        assert time_single_call(10.0) == timedelta(0)


def test_print_single_call_format(capsys):
    with mock.patch("aocutils.timing.time.perf_counter", return_value=3.0):
        print_single_call(3.0)
    out = capsys.readouterr().out
    assert out == f"Time taken for single call:  {timedelta(0)}\n"


def test_call_records_duration():
    timer = TimeRepeatedCalls()
    with mock.patch("aocutils.timing.time.perf_counter", return_value=5.0):
        timer.call(5.0)
        timer.call(5.0)
    assert timer.calls == [timedelta(0), timedelta(0)]


def test_call_with_real_clock_grows_calls():
    timer = TimeRepeatedCalls()
    timer.call(start())
    assert len(timer.calls) == 1
    assert timer.calls[0] >= timedelta(0)


def test_stats_of_known_calls():
    one = timedelta(seconds=1)
    three = timedelta(seconds=3)
    timer = TimeRepeatedCalls(calls=[three, one])
    assert timer.maximum() == three
    assert timer.minimum() == one
    assert timer.total() == timedelta(seconds=4)
    assert timer.average() == timedelta(seconds=2)


def test_average_between_min_and_max():
    timer = TimeRepeatedCalls(
        calls=[timedelta(milliseconds=ms) for ms in (5, 17, 2, 40)]
    )
    assert timer.minimum() <= timer.average() <= timer.maximum()
    assert timer.average() * len(timer.calls) == timer.total()


def test_single_call_stats_agree():
    duration = timedelta(milliseconds=250)
    timer = TimeRepeatedCalls(calls=[duration])
    assert timer.average() == duration
    assert timer.maximum() == duration
    assert timer.minimum() == duration
    assert timer.total() == duration


def test_empty_total_is_zero():
    assert TimeRepeatedCalls().total() == timedelta(0)


def test_empty_stats_raise():
    timer = TimeRepeatedCalls()
    with pytest.raises(IndexError):
        timer.maximum()
    with pytest.raises(IndexError):
        timer.minimum()
    with pytest.raises(ZeroDivisionError):
        timer.average()


def test_print_stats(capsys):
    duration = timedelta(seconds=1)
    TimeRepeatedCalls(calls=[duration]).print_stats()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"Average time taken:  {duration}",
        f"Max time taken:  {duration}",
        f"Min time taken:  {duration}",
        f"Sum time taken:  {duration}",
    ]