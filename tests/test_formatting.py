import io

from rich.console import Console

from rr_scheduler.formatting import (
    COLUMN_WIDTH,
    build_results_table,
    build_summary_table,
    format_results,
    write_results,
)
from rr_scheduler.gantt import build_rich_gantt, render_gantt
from rr_scheduler.models import Process
from rr_scheduler.scenarios import REFERENCE_PROCESSES, REFERENCE_TIME_SLICE
from rr_scheduler.simulator import execute, schedule_rr


def _row(*cells):
    return "".join(str(c).ljust(COLUMN_WIDTH) for c in cells)


def test_table_sorted_by_arrival():
    text = format_results(execute(REFERENCE_PROCESSES, REFERENCE_TIME_SLICE))
    lines = text.splitlines()
    assert lines[0] == _row(
        "Process ID", "Arrival Time", "Burst Time", "Completion Time", "Turnaround Time", "Waiting Time"
    )
    assert lines[1:] == [
        _row(2, 3, 39, 100, 97, 58),
        _row(3, 5, 29, 82, 77, 48),
        _row(1, 9, 2, 14, 5, 3),
        _row(4, 30, 90, 166, 136, 46),
        _row(0, 70, 3, 80, 10, 7),
    ]


def test_write_results_to_stream():
    results = execute([Process(0, 0, 5)], 3)
    buf = io.StringIO()
    write_results(results, buf)
    assert buf.getvalue() == format_results(results)
    assert buf.getvalue().endswith("\n")


def test_rich_tables_render():
    res = schedule_rr(REFERENCE_PROCESSES, REFERENCE_TIME_SLICE)
    console = Console(file=io.StringIO(), width=160)
    console.print(build_results_table(res.processes))
    console.print(build_summary_table(res))
    out = console.file.getvalue()
    assert "Per-process results" in out
    assert "166" in out
    assert "100.0%" in out


def test_plain_gantt():
    res = schedule_rr(
        [Process(0, 0, 5), Process(1, 2, 1), Process(2, 2, 1)],
        2,
    )
    chart = render_gantt(res.timeline).splitlines()
    assert chart[0] == "Gantt Chart:"
    assert chart[1] == "|=======|"
    assert chart[3] == "0   2   3   4   6   7"


def test_plain_gantt_idle_gap():
    res = schedule_rr([Process(0, 0, 2), Process(1, 10, 3)], 2)
    chart = render_gantt(res.timeline).splitlines()
    assert chart[1] == "|==........===|"
    assert chart[3] == "0   2  10  12  13"


def test_empty_gantt():
    assert render_gantt([]) == "(no execution)"
    _, marks = build_rich_gantt([])
    assert marks == ""


def test_rich_gantt_time_marks_start_at_first_arrival():
    res = schedule_rr([Process(0, 5, 4)], 3)
    _, marks = build_rich_gantt(res.timeline)
    assert marks == "5   8   9"
