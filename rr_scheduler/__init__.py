"""
Round Robin scheduler package.

Simulates Round Robin CPU scheduling over a fixed process list and reports
completion, turnaround and waiting times for every process.
"""

from .errors import InternalInvariantError, InvalidArgumentError, SchedulerError
from .models import Process, ProcessResult
from .simulator import execute, schedule_rr

__all__ = [
    "Process",
    "ProcessResult",
    "SchedulerError",
    "InvalidArgumentError",
    "InternalInvariantError",
    "execute",
    "schedule_rr",
]
