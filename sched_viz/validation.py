"""
Input checks run before any engine is called.

Each function raises :class:`~sched_viz.errors.InputError` (or
:class:`~sched_viz.errors.ConfigurationError`) with a message meant for
the end user.
"""

from __future__ import annotations

from typing import Iterable, List

from .config import IDLE_LABEL, MAX_BATCH_PROCESSES, MIN_BATCH_PROCESSES
from .errors import ConfigurationError, InputError
from .models import BankersProcess, Process, SystemSnapshot


def validate_batch_size(count: int) -> None:
    if count < MIN_BATCH_PROCESSES or count > MAX_BATCH_PROCESSES:
        raise InputError(
            f"Number of processes must be between {MIN_BATCH_PROCESSES} and {MAX_BATCH_PROCESSES} (got {count})"
        )


def _check_unique(ids: Iterable[str], what: str) -> None:
    seen = set()
    for ident in ids:
        key = ident.strip().lower()
        if key in seen:
            raise InputError(f"{what} must be unique (duplicate: {ident!r})")
        seen.add(key)


def validate_processes(processes: List[Process], enforce_batch_size: bool = False) -> List[Process]:
    """
    Check scheduling input: ids present, arrival >= 0, burst > 0, unique names.
    """
    if not processes:
        raise InputError("Add at least one process")
    if enforce_batch_size:
        validate_batch_size(len(processes))

    for p in processes:
        if not p.pid or not p.pid.strip():
            raise InputError("Each process must have a name")
        if p.label.strip().lower() == IDLE_LABEL.lower():
            raise InputError(f"Process name {p.label!r} is reserved for CPU idle time")
        if p.arrival_time < 0:
            raise InputError(f"Process {p.pid!r}: arrival time cannot be negative")
        if p.burst_time <= 0:
            raise InputError(f"Process {p.pid!r}: burst time must be greater than zero")

    _check_unique((p.pid for p in processes), "Process ids")
    _check_unique((p.label for p in processes), "Process names")
    return processes


def validate_bankers_process(process: BankersProcess) -> BankersProcess:
    if not process.pid or not process.pid.strip():
        raise InputError("Each process must have an ID")
    if process.max_need <= 0:
        raise InputError(f"Process {process.pid!r}: maximum need must be greater than zero")
    if process.allocation < 0:
        raise InputError(f"Process {process.pid!r}: currently holding cannot be negative")
    if process.allocation > process.max_need:
        raise InputError(f"Process {process.pid!r}: cannot hold more than its maximum need")
    return process


def validate_snapshot(snapshot: SystemSnapshot, enforce_batch_size: bool = False) -> SystemSnapshot:
    """
    Check a Banker's snapshot; allocations above the total are a
    :class:`ConfigurationError` rather than an input error.
    """
    if snapshot.total_resources <= 0:
        raise InputError("Total resources must be a positive number")
    if enforce_batch_size:
        validate_batch_size(len(snapshot.processes))

    for process in snapshot.processes:
        validate_bankers_process(process)
    _check_unique((p.pid for p in snapshot.processes), "Process IDs")

    if snapshot.available < 0:
        raise ConfigurationError("Allocated resources exceed the total resources available")
    return snapshot

