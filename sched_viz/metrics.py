from __future__ import annotations

from typing import List

from .models import ProcessMetrics, ScheduleResult, ScheduleSummary, SystemMetrics


def summarize_process_metrics(processes: List[ProcessMetrics]) -> ScheduleSummary:
    """
    Totals and averages of waiting / turnaround time.
    """
    if not processes:
        return ScheduleSummary(total_waiting=0, total_turnaround=0, avg_waiting=0.0, avg_turnaround=0.0)

    n = len(processes)
    total_waiting = sum(p.waiting_time for p in processes)
    total_turnaround = sum(p.turnaround_time for p in processes)
    return ScheduleSummary(
        total_waiting=total_waiting,
        total_turnaround=total_turnaround,
        avg_waiting=total_waiting / n,
        avg_turnaround=total_turnaround / n,
    )


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute throughput and CPU utilization from the result's timeline and
    attach them (plus the per-process summary) to ``result``.
    """
    result.summary = summarize_process_metrics(result.processes)

    if not result.timeline:
        system = SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = result.timeline[-1].end
    cpu_busy_time = sum(p.burst_time for p in result.processes)
    idle_time = makespan - cpu_busy_time

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=idle_time,
        makespan=makespan,
        throughput=len(result.processes) / makespan,
        cpu_utilization=cpu_busy_time / makespan,
    )
    result.system = system
    return system
