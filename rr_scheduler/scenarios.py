"""
Reference scenario used as a regression fixture and by ``rr-scheduler demo``.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .models import Process, ProcessResult
from .simulator import execute

REFERENCE_TIME_SLICE = 3

REFERENCE_PROCESSES = [
    Process(pid=0, arrival_time=70, burst_time=3),
    Process(pid=1, arrival_time=9, burst_time=2),
    Process(pid=2, arrival_time=3, burst_time=39),
    Process(pid=3, arrival_time=5, burst_time=29),
    Process(pid=4, arrival_time=30, burst_time=90),
]

REFERENCE_COMPLETION_TIMES: Dict[int, int] = {0: 80, 1: 14, 2: 100, 3: 82, 4: 166}


def expected_results() -> List[ProcessResult]:
    return [
        ProcessResult.from_process(p, REFERENCE_COMPLETION_TIMES[p.pid])
        for p in REFERENCE_PROCESSES
    ]


def check_reference() -> Tuple[List[ProcessResult], List[str]]:
    """
    Run the reference scenario and describe every result that differs from
    the expected one. An empty mismatch list means the run is correct.
    """
    results = execute(REFERENCE_PROCESSES, REFERENCE_TIME_SLICE)
    by_pid = {r.pid: r for r in results}

    mismatches: List[str] = []
    for expected in expected_results():
        actual = by_pid.get(expected.pid)
        if actual is None:
            mismatches.append(f"process {expected.pid}: no result")
        elif actual != expected:
            mismatches.append(f"process {expected.pid}: expected {expected}, got {actual}")
    if len(results) != len(REFERENCE_PROCESSES):
        mismatches.append(f"expected {len(REFERENCE_PROCESSES)} results, got {len(results)}")
    return results, mismatches
