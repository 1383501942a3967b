"""
Scheduling visualizer package.

Computes FCFS and non-preemptive SJF schedules with their Gantt timelines,
and enumerates Banker's Algorithm safe / unsafe sequences.
"""

from .algorithms import run_algorithm, schedule_fcfs, schedule_sjf
from .bankers import evaluate_bankers, evaluate_snapshot, heap_permutations, is_safe_order
from .timeline import build_timeline

__all__ = [
    "cli",
    "build_timeline",
    "evaluate_bankers",
    "evaluate_snapshot",
    "heap_permutations",
    "is_safe_order",
    "run_algorithm",
    "schedule_fcfs",
    "schedule_sjf",
]
