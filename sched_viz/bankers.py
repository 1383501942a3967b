"""
Banker's Algorithm safety analysis for a single resource type.

Rather than stopping at the first safe sequence, every ordering of the
processes is enumerated and classified so the full picture can be shown.
"""

from __future__ import annotations

import logging
from math import factorial
from typing import Iterator, List, Sequence

from .config import MAX_BANKERS_PROCESSES
from .errors import ComputationError, ConfigurationError
from .models import BankersProcess, BankersResult, SequenceResult, SystemSnapshot

logger = logging.getLogger(__name__)


def heap_permutations(n: int) -> Iterator[List[int]]:
    """
    Yield every ordering of ``range(n)`` using iterative Heap's algorithm.

    The identity order comes first. Each yielded list is a fresh copy; the
    traversal state lives in ``order`` and ``control`` only.
    """
    if n <= 0:
        return

    order = list(range(n))
    control = [0] * n
    yield list(order)

    i = 0
    while i < n:
        if control[i] < i:
            j = 0 if i % 2 == 0 else control[i]
            order[j], order[i] = order[i], order[j]
            yield list(order)
            control[i] += 1
            i = 0
        else:
            control[i] = 0
            i += 1


def is_safe_order(processes: Sequence[BankersProcess], order: Sequence[int], available: int) -> bool:
    """
    Walk ``order``; each process must fit its remaining need into what is
    available, then it finishes and releases everything it holds.
    """
    for index in order:
        process = processes[index]
        if process.need > available:
            return False
        available += process.allocation
    return True


def evaluate_bankers(processes: Sequence[BankersProcess], available: int) -> List[SequenceResult]:
    """
    Classify every permutation of ``processes`` as safe or unsafe.
    """
    if available < 0:
        raise ConfigurationError(
            f"Allocated resources exceed the total resources available (available is {available})"
        )

    if not processes:
        return []

    n = len(processes)
    if n > MAX_BANKERS_PROCESSES:
        raise ComputationError(
            f"Input too large: {n} processes means {factorial(n):,} orderings "
            f"(limit is {MAX_BANKERS_PROCESSES} processes)"
        )

    logger.debug("Enumerating %d orderings with %d units available", factorial(n), available)

    results: List[SequenceResult] = []
    for order in heap_permutations(n):
        results.append(
            SequenceResult(
                order=tuple(processes[i].pid for i in order),
                safe=is_safe_order(processes, order, available),
            )
        )
    return results


def evaluate_snapshot(snapshot: SystemSnapshot) -> BankersResult:
    """
    Derive the available units of ``snapshot`` and evaluate every ordering.
    """
    available = snapshot.available
    result = BankersResult(available=available, sequences=evaluate_bankers(snapshot.processes, available))
    logger.debug("%d safe / %d unsafe orderings", result.safe_count, result.unsafe_count)
    return result
