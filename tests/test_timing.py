import io
import threading
import time

from studynotes.timing import FuncCallTimer, RunTimer, TimeUnit, elapsed_time, singleton


def test_elapsed_time_returns_result(capsys):
    result, elapsed = elapsed_time(TimeUnit.MILLI, sum, [1, 2, 3])
    assert result == sum([1, 2, 3])
    assert elapsed >= 0
    out = capsys.readouterr().out
    assert out.startswith("Function HashCode:")
    assert " ms " in out


def test_elapsed_time_passes_keywords(capsys):
    result, _ = elapsed_time(TimeUnit.SECOND, sorted, [3, 1, 2], reverse=True)
    assert result == [3, 2, 1]
    assert " s " in capsys.readouterr().out


def test_elapsed_time_measures_sleep(capsys):
    _, elapsed = elapsed_time(TimeUnit.MICRO, time.sleep, 0.01)
    assert elapsed >= 0.01 * TimeUnit.MICRO.per_second * 0.5
    assert " us " in capsys.readouterr().out


def test_run_timer_writes_to_stream():
    stream = io.StringIO()
    with RunTimer(TimeUnit.MICRO, stream) as timer:
        time.sleep(0.001)
    assert timer.elapsed is not None and timer.elapsed > 0
    assert stream.getvalue().startswith("elapsed time:")
    assert stream.getvalue().endswith(" us \n")


def test_run_timer_defaults_to_milliseconds(capsys):
    with RunTimer() as timer:
        pass
    assert timer.unit is TimeUnit.MILLI
    assert capsys.readouterr().out.endswith(" ms \n")


def test_func_call_timer_repeats_and_stops():
    calls = []
    seen = threading.Event()

    def tick(tag):
        calls.append(tag)
        if len(calls) >= 2:
            seen.set()

    timer = FuncCallTimer()
    assert timer.running is False
    timer.start_timer(5, tick, "x")
    assert timer.running is True
    assert seen.wait(2.0)
    timer.stop()
    assert timer.running is False
    time.sleep(0.05)
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count
    assert set(calls) == {"x"}


def test_func_call_timer_restart_stops_previous():
    first, second = [], []
    timer = FuncCallTimer()
    timer.start_timer(5, first.append, 1)
    time.sleep(0.03)
    timer.start_timer(5, second.append, 2)
    time.sleep(0.03)
    settled = len(first)
    time.sleep(0.05)
    timer.stop()
    assert len(first) == settled
    assert second and set(second) == {2}


def test_singleton_shares_one_instance():
    created = []

    class Config:
        def __init__(self):
            created.append(self)

    shared = singleton(Config)
    a = shared.instance()
    b = shared.instance()
    assert a is b
    assert created == [a]