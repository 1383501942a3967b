"""
Random workload generation.

A fixed seed gives the same batch every time, which keeps examples and
classroom exercises reproducible.
"""

from __future__ import annotations

import random
from typing import List, Optional

from .config import ARRIVAL_RANGE, BURST_RANGE, DEFAULT_SEED, MAX_NEED_RANGE
from .models import BankersProcess, Process, SystemSnapshot
from .validation import validate_batch_size


def generate_processes(count: int, seed: Optional[int] = DEFAULT_SEED) -> List[Process]:
    """Scheduling batch named P1..Pn with random arrival and burst times."""
    validate_batch_size(count)
    rng = random.Random(seed)

    processes = []
    for i in range(count):
        processes.append(
            Process(
                pid=f"P{i + 1}",
                arrival_time=rng.randint(*ARRIVAL_RANGE),
                burst_time=rng.randint(*BURST_RANGE),
            )
        )
    return processes


def generate_snapshot(count: int, seed: Optional[int] = DEFAULT_SEED, slack: int = 3) -> SystemSnapshot:
    """
    Banker's snapshot with random max needs and allocations.

    The total is the allocated units plus ``slack`` free units, so the
    snapshot is always valid though not necessarily safe.
    """
    validate_batch_size(count)
    rng = random.Random(seed)

    processes = []
    for i in range(count):
        max_need = rng.randint(*MAX_NEED_RANGE)
        processes.append(
            BankersProcess(
                pid=f"P{i + 1}",
                max_need=max_need,
                allocation=rng.randint(0, max_need),
            )
        )

    total = sum(p.allocation for p in processes) + max(slack, 0)
    # Total resources must stay positive even when nothing is allocated.
    return SystemSnapshot(total_resources=max(total, 1), processes=processes)
