from __future__ import annotations

import logging
from typing import List

from .errors import InputError
from .metrics import compute_system_metrics
from .models import Process, ProcessMetrics, ScheduleResult
from .timeline import timeline_for

logger = logging.getLogger(__name__)


def _check_processes(processes: List[Process]) -> None:
    for p in processes:
        if p.burst_time <= 0:
            raise InputError(f"Process {p.pid!r} has burst time {p.burst_time}; it must be > 0")
        if p.arrival_time < 0:
            raise InputError(f"Process {p.pid!r} has negative arrival time {p.arrival_time}")


def _dispatch(p: Process, time: int) -> ProcessMetrics:
    start_time = time
    completion_time = start_time + p.burst_time
    turnaround_time = completion_time - p.arrival_time

    return ProcessMetrics(
        pid=p.pid,
        name=p.label,
        arrival_time=p.arrival_time,
        burst_time=p.burst_time,
        start_time=start_time,
        completion_time=completion_time,
        waiting_time=turnaround_time - p.burst_time,
        turnaround_time=turnaround_time,
    )


def _finish(algorithm: str, metrics: List[ProcessMetrics]) -> ScheduleResult:
    result = ScheduleResult(algorithm=algorithm, processes=metrics, timeline=timeline_for(metrics))
    compute_system_metrics(result)
    return result


def schedule_fcfs(processes: List[Process]) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    ``sorted`` is stable, so processes arriving together keep their input order.
    """
    _check_processes(processes)
    processes_sorted = sorted(processes, key=lambda p: p.arrival_time)

    time = 0
    metrics: List[ProcessMetrics] = []

    for p in processes_sorted:
        if time < p.arrival_time:
            logger.debug("CPU idle from %d to %d", time, p.arrival_time)
            time = p.arrival_time

        m = _dispatch(p, time)
        metrics.append(m)
        time = m.completion_time

    return _finish("FCFS", metrics)


def schedule_sjf(processes: List[Process]) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest burst time. Ties go to the
    earlier arrival, then to whichever came first in the input.
    """
    _check_processes(processes)
    # Work on indexed copies so we don't surprise callers.
    remaining = list(enumerate(processes))

    time = 0
    metrics: List[ProcessMetrics] = []

    while remaining:
        ready = [(i, p) for i, p in remaining if p.arrival_time <= time]

        if not ready:
            # If nothing is ready, jump time to the next arrival.
            next_arrival = min(p.arrival_time for _, p in remaining)
            logger.debug("CPU idle from %d to %d", time, next_arrival)
            time = next_arrival
            continue

        idx, p = min(ready, key=lambda item: (item[1].burst_time, item[1].arrival_time, item[0]))
        logger.debug("t=%d: dispatch %s (burst %d) out of %d ready", time, p.pid, p.burst_time, len(ready))

        m = _dispatch(p, time)
        metrics.append(m)
        remaining = [(i, q) for i, q in remaining if i != idx]
        time = m.completion_time

    return _finish("SJF (non-preemptive)", metrics)


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
}


def run_algorithm(name: str, processes: List[Process]) -> ScheduleResult:
    """
    Dispatch to the requested algorithm by its short name.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise InputError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    func = ALGORITHMS[name]
    return func(processes)
