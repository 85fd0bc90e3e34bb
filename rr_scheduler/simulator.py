from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional, Sequence, Set, Tuple

from .errors import InternalInvariantError, InvalidArgumentError
from .metrics import compute_system_metrics
from .models import Process, ProcessResult, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)

DEFAULT_TIME_SLICE = 3


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: Sequence[Process], time_slice: int) -> None:
    """
    Reject input the simulation cannot handle before any state is built.
    """
    if not _is_int(time_slice):
        raise InvalidArgumentError(f"Time slice must be an integer, got {time_slice!r}")
    if time_slice < 1:
        raise InvalidArgumentError(f"Time slice must be at least 1, got {time_slice}")
    if not processes:
        raise InvalidArgumentError("Round Robin requires at least one process")

    seen: Set[int] = set()
    for p in processes:
        for name in ("pid", "arrival_time", "burst_time"):
            value = getattr(p, name)
            if not _is_int(value):
                raise InvalidArgumentError(f"Process {p.pid!r}: {name} must be an integer, got {value!r}")
        if p.pid < 0:
            raise InvalidArgumentError(f"Process id must be non-negative, got {p.pid}")
        if p.pid in seen:
            raise InvalidArgumentError(f"Duplicate process id {p.pid}")
        if p.arrival_time < 0:
            raise InvalidArgumentError(
                f"Process {p.pid}: arrival time must be non-negative, got {p.arrival_time}"
            )
        if p.burst_time < 1:
            raise InvalidArgumentError(
                f"Process {p.pid}: burst time must be at least 1, got {p.burst_time}"
            )
        seen.add(p.pid)


def schedule_rr(processes: Sequence[Process], time_slice: int = DEFAULT_TIME_SLICE) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time slice.

    The clock starts at the earliest arrival. Processes that arrive by the
    end of a quantum join the ready queue before the preempted process is put
    back, so same-tick arrivals run ahead of it. Results are listed in
    completion order.
    """
    validate_processes(processes, time_slice)

    ready: Deque[Tuple[Process, int]] = deque()
    arrived: Set[int] = set()
    timeline: List[ScheduledSlice] = []
    results: List[ProcessResult] = []

    # Input indices by arrival; everything before the cursor is admitted.
    pending = sorted(range(len(processes)), key=lambda i: processes[i].arrival_time)
    cursor = 0

    time = processes[pending[0]].arrival_time

    def enqueue_new_arrivals(current_time: int) -> None:
        nonlocal cursor
        batch = []
        while cursor < len(pending) and processes[pending[cursor]].arrival_time <= current_time:
            batch.append(pending[cursor])
            cursor += 1
        # A batch may span several arrival times; input order decides within it.
        for i in sorted(batch):
            p = processes[i]
            ready.append((p, p.burst_time))
            arrived.add(p.pid)
            logger.debug("t=%d: process %d admitted", current_time, p.pid)

    def next_arrival() -> Optional[int]:
        if cursor < len(pending):
            return processes[pending[cursor]].arrival_time
        return None

    enqueue_new_arrivals(time)

    while ready:
        current, remaining = ready.popleft()

        run_for = min(time_slice, remaining)
        timeline.append(ScheduledSlice(pid=current.pid, start_time=time, end_time=time + run_for))
        remaining -= run_for
        time += run_for

        enqueue_new_arrivals(time)

        if remaining > 0:
            logger.debug("t=%d: process %d preempted, %d left", time, current.pid, remaining)
            ready.append((current, remaining))
            continue

        if current.pid not in arrived:
            raise InternalInvariantError(f"Process {current.pid} completed without being admitted")
        logger.debug("t=%d: process %d completed", time, current.pid)
        results.append(ProcessResult.from_process(current, time))

        if not ready:
            # CPU idle: jump to the next arrival, if any is left.
            nxt = next_arrival()
            if nxt is not None:
                logger.debug("t=%d: CPU idle until %d", time, nxt)
                time = nxt
                enqueue_new_arrivals(time)

    if len(results) != len(processes):
        raise InternalInvariantError(
            f"Simulation finished with {len(results)} results for {len(processes)} processes"
        )

    result = ScheduleResult(algorithm="Round Robin", quantum=time_slice, processes=results, timeline=timeline)
    compute_system_metrics(result)
    return result


def execute(processes: Sequence[Process], time_slice: int = DEFAULT_TIME_SLICE) -> List[ProcessResult]:
    """
    Run Round Robin and return one result per process, in completion order.
    """
    return schedule_rr(processes, time_slice).processes
