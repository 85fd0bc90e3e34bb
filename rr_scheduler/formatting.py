from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from rich import box
from rich.table import Table

from .metrics import summarize_process_metrics
from .models import ProcessResult, ScheduleResult

COLUMN_WIDTH = 17

HEADERS = [
    "Process ID",
    "Arrival Time",
    "Burst Time",
    "Completion Time",
    "Turnaround Time",
    "Waiting Time",
]


def _sorted_by_arrival(results: Sequence[ProcessResult]) -> List[ProcessResult]:
    return sorted(results, key=lambda r: (r.arrival_time, r.pid))


def _row(p: ProcessResult) -> List[str]:
    return [
        str(p.pid),
        str(p.arrival_time),
        str(p.burst_time),
        str(p.completion_time),
        str(p.turnaround_time),
        str(p.waiting_time),
    ]


def format_results(results: Sequence[ProcessResult]) -> str:
    """
    Fixed-width text table, one left-aligned cell per column, rows ordered by
    arrival time.
    """
    lines = ["".join(h.ljust(COLUMN_WIDTH) for h in HEADERS)]
    for p in _sorted_by_arrival(results):
        lines.append("".join(cell.ljust(COLUMN_WIDTH) for cell in _row(p)))
    return "\n".join(lines) + "\n"


def write_results(results: Sequence[ProcessResult], stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(format_results(results))


def build_results_table(results: Sequence[ProcessResult]) -> Table:
    table = Table(title="Per-process results", box=box.SIMPLE_HEAVY)
    for h in HEADERS:
        table.add_column(h, justify="center" if h == "Process ID" else "right")

    for p in _sorted_by_arrival(results):
        table.add_row(*_row(p))

    return table


def build_summary_table(result: ScheduleResult) -> Table:
    summary = summarize_process_metrics(result.processes)

    table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
    table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
    if result.system:
        sys_ = result.system
        table.add_row("Makespan", str(sys_.makespan))
        table.add_row("Idle time", str(sys_.idle_time))
        table.add_row("Throughput (proc/time)", f"{sys_.throughput:.3f}")
        table.add_row("CPU utilization", f"{sys_.cpu_utilization*100:.1f}%")
        table.add_row("Context switches", str(sys_.context_switches))

    return table
