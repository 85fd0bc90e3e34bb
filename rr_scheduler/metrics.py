from __future__ import annotations

from typing import Dict, List

from .models import ProcessResult, ScheduleResult, SystemMetrics


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute throughput and CPU utilization given populated per-process results
    and timeline slices. The makespan runs from the first arrival to the last
    completion, since the clock does not start before anything has arrived.
    """
    if not result.processes:
        system = SystemMetrics(cpu_busy_time=0, makespan=0, idle_time=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    first_arrival = min(p.arrival_time for p in result.processes)
    makespan = max(p.completion_time for p in result.processes) - first_arrival
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in result.timeline)

    throughput = len(result.processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    # A pid change across an idle gap is a fresh dispatch, not a switch.
    context_switches = sum(
        1
        for prev, cur in zip(result.timeline, result.timeline[1:])
        if prev.pid != cur.pid and cur.start_time == prev.end_time
    )

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        idle_time=makespan - cpu_busy_time,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        context_switches=context_switches,
    )
    result.system = system
    return system


def summarize_process_metrics(processes: List[ProcessResult]) -> Dict[str, float]:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
    }
