from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidArgumentError(SchedulerError, ValueError):
    """
    Bad input: empty process list, non-positive time slice or burst time,
    negative arrival time or pid, duplicate pids, unreadable workload.
    """


class InternalInvariantError(SchedulerError, RuntimeError):
    """
    The simulation reached a state that correct scheduling can never produce.
    """
