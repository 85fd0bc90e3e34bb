from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int


@dataclass(frozen=True)
class ProcessResult:
    """
    Outcome of one process once its remaining burst time reaches zero.
    """

    pid: int
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int

    @classmethod
    def from_process(cls, process: Process, completion_time: int) -> "ProcessResult":
        turnaround_time = completion_time - process.arrival_time
        return cls(
            pid=process.pid,
            arrival_time=process.arrival_time,
            burst_time=process.burst_time,
            completion_time=completion_time,
            turnaround_time=turnaround_time,
            waiting_time=turnaround_time - process.burst_time,
        )


@dataclass(frozen=True)
class ScheduledSlice:
    """
    One quantum (or the tail of a burst) executed by a single process.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    idle_time: int
    throughput: float
    cpu_utilization: float
    context_switches: int = 0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: int
    processes: List[ProcessResult] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
