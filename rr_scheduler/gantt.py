from __future__ import annotations

from typing import Dict, List, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def _ordered(slices: List[ScheduledSlice]) -> Tuple[List[ScheduledSlice], int]:
    ordered = sorted(slices, key=lambda s: (s.start_time, s.end_time))
    return ordered, ordered[0].start_time


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart. Each time unit is one character; idle gaps are dots.
    """
    if not slices:
        return "(no execution)"

    ordered, origin = _ordered(slices)

    bar = "|"
    labels = " "
    time_marks = str(origin)
    last_time = origin

    for sl in ordered:
        idle_gap = sl.start_time - last_time
        if idle_gap > 0:
            bar += "." * idle_gap
            labels += " " * idle_gap
            time_marks += f"{sl.start_time:>4}"

        width = sl.end_time - sl.start_time
        label = f"P{sl.pid}"
        bar += "=" * width
        labels += label[:width].ljust(width)
        last_time = sl.end_time
        time_marks += f"{last_time:>4}"

    bar += "|"
    return "\n".join(["Gantt Chart:", bar, labels, time_marks])


def build_rich_gantt(slices: List[ScheduledSlice]) -> Tuple[Panel, str]:
    """
    Build a Rich Panel holding a colored Gantt chart, plus a string of time marks.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    ordered, origin = _ordered(slices)
    pid_to_color: Dict[int, str] = {}

    def pid_color(pid: int) -> str:
        if pid not in pid_to_color:
            pid_to_color[pid] = COLORS[len(pid_to_color) % len(COLORS)]
        return pid_to_color[pid]

    timeline = Text()
    labels = Text()
    time_marks = str(origin)
    last_time = origin

    for sl in ordered:
        idle_gap = sl.start_time - last_time
        if idle_gap > 0:
            timeline.append(" " * idle_gap)
            labels.append(" " * idle_gap)
            time_marks += f"{sl.start_time:>4}"

        width = sl.end_time - sl.start_time
        timeline.append(" " * width, style=f"on {pid_color(sl.pid)}")
        labels.append(f"P{sl.pid}"[:width].ljust(width), style="bold")

        last_time = sl.end_time
        time_marks += f"{last_time:>4}"

    grid = Table.grid(padding=(0, 0))
    grid.add_row(timeline)
    grid.add_row(labels)

    return Panel.fit(grid, title="Gantt Chart"), time_marks
